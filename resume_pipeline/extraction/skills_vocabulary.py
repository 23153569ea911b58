"""Fixed skill vocabulary for the deterministic extractor."""

import re

SKILLS: tuple[str, ...] = (
    # Programming languages
    "JavaScript", "TypeScript", "Python", "Java", "C++", "C#", "Ruby", "PHP", "Swift", "Go",
    "Rust", "Kotlin", "Scala", "Perl", "Haskell", "Lua", "R", "MATLAB", "Groovy", "Objective-C",
    # Frontend
    "React", "Angular", "Vue", "Svelte", "jQuery", "Next.js", "Gatsby", "HTML", "CSS", "SASS",
    "LESS", "Bootstrap", "Tailwind", "Material UI", "Webpack", "Babel", "ESLint",
    # Backend
    "Node.js", "Express", "Django", "Flask", "Spring", "Laravel", "ASP.NET", "Rails", "FastAPI",
    "Symfony", "NestJS", "Deno", "GraphQL", "REST API", "WebSockets", "Microservices", "gRPC",
    # Databases
    "SQL", "MySQL", "PostgreSQL", "MongoDB", "DynamoDB", "Cassandra", "Redis", "SQLite", "Oracle",
    "MariaDB", "Firebase", "Supabase", "Elasticsearch", "Neo4j", "CouchDB", "InfluxDB",
    # Cloud and DevOps
    "AWS", "Azure", "GCP", "Docker", "Kubernetes", "CI/CD", "Git", "Jenkins", "GitHub Actions",
    "Terraform", "Ansible", "Puppet", "Chef", "Prometheus", "Grafana", "ELK Stack",
    # AI and data science
    "Machine Learning", "AI", "Data Science", "TensorFlow", "PyTorch", "Pandas", "NumPy",
    "Scikit-learn", "Keras", "NLTK", "Computer Vision", "NLP", "Big Data", "Data Mining",
    # Project management
    "Agile", "Scrum", "Kanban", "Jira", "Confluence", "Project Management", "Product Management",
    "Team Leadership", "Communication", "Problem Solving", "Critical Thinking",
    # Operating systems
    "Linux", "Unix", "Windows", "MacOS", "Android", "iOS", "Mobile Development",
    # Testing
    "Testing", "QA", "Unit Testing", "Integration Testing", "Jest", "Mocha", "Cypress",
    "Selenium", "JUnit", "TestNG", "Pytest", "TDD", "BDD",
    # Other
    "Blockchain", "Ethereum", "Smart Contracts", "Solidity", "Web3", "IoT", "AR/VR",
    "Game Development", "Unity", "Unreal Engine",
)

# Terms this short collide with ordinary words unless matched case-sensitively.
_CASE_SENSITIVE_MAX_LEN = 2


def _compile(skill: str) -> re.Pattern[str]:
    flags = 0 if len(skill) <= _CASE_SENSITIVE_MAX_LEN else re.IGNORECASE
    return re.compile(rf"(?<![A-Za-z0-9]){re.escape(skill)}(?![A-Za-z0-9+#])", flags)


SKILL_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = tuple(
    (skill, _compile(skill)) for skill in SKILLS
)


def find_skills(text: str) -> list[str]:
    """Vocabulary terms present in ``text``, in vocabulary order."""
    return [skill for skill, pattern in SKILL_PATTERNS if pattern.search(text)]
