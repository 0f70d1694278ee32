"""Static skill vocabulary, role profiles and recommendation templates."""

# Canonical lowercase skills, in extraction order. Matched as plain
# substrings, so short tokens ("c", "r", "go") also fire inside longer words.
COMMON_SKILLS: tuple[str, ...] = tuple(dict.fromkeys([
    # Web development
    "javascript", "typescript", "react", "angular", "vue", "node.js", "express",
    "next.js", "nest.js", "html", "css", "tailwind", "redux", "webpack", "vite",
    "graphql", "rest api",
    # Backend & languages
    "python", "java", "c++", "c#", "c", "go", "golang", "rust", "php", "ruby",
    "scala", "django", "flask", "spring boot", ".net", "laravel", "rails",
    # Databases
    "sql", "mysql", "postgresql", "mongodb", "redis", "elasticsearch",
    "cassandra", "dynamodb",
    # Cloud & DevOps
    "aws", "azure", "gcp", "google cloud", "docker", "kubernetes", "jenkins",
    "github actions", "gitlab ci", "circleci", "terraform", "ansible", "linux",
    "bash", "shell scripting",
    # Data science & AI
    "machine learning", "deep learning", "ai", "data science", "nlp",
    "computer vision", "pandas", "numpy", "scikit-learn", "tensorflow",
    "pytorch", "keras", "matplotlib", "seaborn", "statistics",
    "linear algebra", "r", "spark", "hadoop",
    # Mobile
    "react native", "flutter", "swift", "kotlin", "ios", "android", "dart",
    # QA & testing
    "selenium", "cypress", "jest", "mocha", "chai", "junit", "testing", "qa",
    # Tools & methodologies
    "git", "agile", "scrum", "jira", "confluence", "figma", "adobe xd", "postman",
    # Soft skills
    "leadership", "communication", "teamwork", "problem solving",
    "project management", "critical thinking", "adaptability", "time management",
]))

# Role name -> skills a job description for that role implies
ROLE_SKILLS: dict[str, tuple[str, ...]] = {
    "frontend developer": ("react", "javascript", "typescript", "html", "css", "tailwind", "git", "redux"),
    "backend developer": ("node.js", "python", "java", "sql", "mongodb", "api", "git", "docker"),
    "full stack developer": ("react", "node.js", "javascript", "typescript", "sql", "mongodb", "git", "aws"),
    "mobile developer": ("react native", "flutter", "ios", "android", "swift", "kotlin", "git"),
    "data scientist": ("python", "machine learning", "statistics", "sql", "pandas", "numpy", "tensorflow"),
    "data analyst": ("sql", "python", "excel", "tableau", "power bi", "statistics", "data visualization"),
    "devops engineer": ("docker", "kubernetes", "aws", "linux", "jenkins", "terraform", "ci/cd", "python"),
    "cloud architect": ("aws", "azure", "gcp", "cloud security", "networking", "terraform", "docker"),
    "software engineer": ("javascript", "python", "java", "git", "sql", "problem solving", "algorithms"),
    "qa engineer": ("selenium", "cypress", "testing", "javascript", "python", "sql", "git"),
    "security engineer": ("network security", "linux", "python", "cybersecurity", "penetration testing", "firewalls"),
    "ui/ux designer": ("figma", "adobe xd", "prototyping", "wireframing", "css", "html", "user research"),
    "product manager": ("product management", "agile", "scrum", "jira", "communication", "roadmap", "analytics"),
    "ai engineer": ("python", "machine learning", "deep learning", "tensorflow", "pytorch", "nlp", "api"),
    "machine learning engineer": ("python", "machine learning", "tensorflow", "pytorch", "scikit-learn", "sql", "aws"),
}

COMMON_TITLES: tuple[str, ...] = (
    "software engineer", "developer", "frontend developer", "backend developer",
    "full stack", "data scientist", "data analyst", "project manager", "product manager",
    "designer", "ux designer", "ui designer", "devops engineer", "qa engineer",
    "system administrator", "network engineer", "database administrator", "cloud architect",
)

# Action verbs counted as keywords when the job description uses them
DOMAIN_TERMS: tuple[str, ...] = (
    "designed", "implemented", "optimized", "scaled", "managed",
    "led", "developed", "created", "maintained",
)

COMMON_CERTIFICATIONS: tuple[str, ...] = (
    "aws certified", "azure certified", "google cloud certified", "pmp",
    "scrum master", "cissp", "oracle certified",
)

# Degree markers, highest tier first
EDUCATION_MARKERS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("phd", ("phd", "ph.d", "doctorate")),
    ("masters", ("master", "msc", "mba", "m.tech", "m.e")),
    ("bachelors", ("bachelor", "bsc", "b.tech", "b.e", "bca", "bba")),
)

SECTION_HEADINGS: dict[str, tuple[str, ...]] = {
    "experience": ("experience", "work history"),
    "education": ("education", "academic"),
    "skills": ("skills", "technologies"),
}

BULLET_MARKERS: tuple[str, ...] = ("•", "- ", "* ")

# Gap suggestions when there is no job description to compare against
MODERN_SKILLS: tuple[str, ...] = ("typescript", "docker", "kubernetes", "aws", "react")

LEARNING_PLATFORMS: tuple[tuple[str, str], ...] = (
    ("Udemy", "https://www.udemy.com/courses/search/?q="),
    ("Coursera", "https://www.coursera.org/search?query="),
    ("Pluralsight", "https://www.pluralsight.com/search?q="),
    ("LinkedIn Learning", "https://www.linkedin.com/learning/search?keywords="),
    ("edX", "https://www.edx.org/search?q="),
    ("Codecademy", "https://www.codecademy.com/search?query="),
    ("FreeCodeCamp", "https://www.freecodecamp.org/news/search/?query="),
    ("Udacity", "https://www.udacity.com/courses/all?search="),
    ("Khan Academy", "https://www.khanacademy.org/search?page_search_query="),
    ("YouTube (Programming)", "https://www.youtube.com/results?search_query="),
)

PROJECT_SUGGESTIONS: tuple[dict, ...] = (
    {
        "title": "Build a Full-Stack Web Application",
        "description": "Create an end-to-end application with authentication, database, and modern UI",
        "skills": ["React", "Node.js", "PostgreSQL", "REST API"],
    },
    {
        "title": "Containerize and Deploy Application",
        "description": "Deploy your application using Docker and cloud services",
        "skills": ["Docker", "AWS/Azure", "CI/CD", "DevOps"],
    },
    {
        "title": "Open Source Contribution",
        "description": "Contribute to popular open-source projects to build community presence",
        "skills": ["Git", "GitHub", "Collaboration", "Code Review"],
    },
)

# Role prediction indicators
FRONTEND_SKILLS = frozenset({"react", "vue", "angular", "html", "css"})
BACKEND_SKILLS = frozenset({"node.js", "python", "java", "sql", "mongodb"})
FULL_STACK_FRAMEWORKS = frozenset({"react", "node.js"})
FULL_STACK_DATABASES = frozenset({"sql", "mongodb"})
CLOUD_SKILLS = frozenset({"aws", "docker", "kubernetes"})

# Presentation spellings that plain capitalisation gets wrong
DISPLAY_NAMES: dict[str, str] = {
    "javascript": "JavaScript", "typescript": "TypeScript", "node.js": "Node.js",
    "next.js": "Next.js", "nest.js": "Nest.js", "html": "HTML", "css": "CSS",
    "graphql": "GraphQL", "rest api": "REST API", "php": "PHP", ".net": ".NET",
    "sql": "SQL", "mysql": "MySQL", "postgresql": "PostgreSQL", "mongodb": "MongoDB",
    "dynamodb": "DynamoDB", "aws": "AWS", "gcp": "GCP", "github actions": "GitHub Actions",
    "gitlab ci": "GitLab CI", "circleci": "CircleCI", "ai": "AI", "nlp": "NLP",
    "numpy": "NumPy", "tensorflow": "TensorFlow", "pytorch": "PyTorch",
    "ios": "iOS", "qa": "QA", "adobe xd": "Adobe XD", "ci/cd": "CI/CD",
    "pmp": "PMP", "cissp": "CISSP", "ui/ux designer": "UI/UX Designer",
}


def display_skill(skill: str) -> str:
    """Presentation form of a canonical skill token."""
    if skill in DISPLAY_NAMES:
        return DISPLAY_NAMES[skill]
    return skill[:1].upper() + skill[1:]


def display_title(title: str) -> str:
    return " ".join(word[:1].upper() + word[1:] for word in title.split(" "))
