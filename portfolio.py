"""Static portfolio content. Read-only; AI flows get it via get_portfolio_snapshot()."""
from ai.schemas import Contact, Experience, PortfolioSnapshot, Project, Skill

ABOUT_ME = """Hi, I'm a Dev/DevOps Engineer who likes boring, reliable infrastructure.

I build delivery pipelines, automate everything that gets done twice, and keep
production observable. Lately: Kubernetes platforms, GitOps, and cost-aware
autoscaling on AWS and GCP."""

SKILL_DETAILS = (
    Skill(name="Docker", level="Expert", category="Containers & Orchestration"),
    Skill(name="Kubernetes", level="Advanced", category="Containers & Orchestration"),
    Skill(name="Terraform", level="Advanced", category="Infrastructure as Code"),
    Skill(name="Ansible", level="Intermediate", category="Infrastructure as Code"),
    Skill(name="GitHub Actions", level="Advanced", category="CI/CD & Automation"),
    Skill(name="Argo CD", level="Advanced", category="CI/CD & Automation"),
    Skill(name="AWS", level="Advanced", category="Cloud Platforms"),
    Skill(name="GCP", level="Intermediate", category="Cloud Platforms"),
    Skill(name="Prometheus", level="Advanced", category="Observability"),
    Skill(name="Grafana", level="Advanced", category="Observability"),
    Skill(name="Python", level="Advanced", category="Languages"),
    Skill(name="Go", level="Intermediate", category="Languages"),
    Skill(name="Bash", level="Expert", category="Languages"),
)

SKILLS = tuple(skill.name for skill in SKILL_DETAILS)

PROJECTS = (
    Project(
        name="auto-scaler-cloud",
        title="Auto-Scaling Cloud Infrastructure",
        technologies="Terraform, AWS, Python, CloudWatch",
        description="Terraform modules and a Python controller that scale EC2 "
                    "fleets on queue depth and scheduled load forecasts.",
        link="https://github.com/dev-user/auto-scaler-cloud",
    ),
    Project(
        name="gitops-pipeline",
        title="Kubernetes GitOps Pipeline",
        technologies="Kubernetes, Argo CD, Helm, GitHub Actions",
        description="Build-test-promote pipeline where every environment is a "
                    "Git branch reconciled by Argo CD.",
        link="https://github.com/dev-user/gitops-pipeline",
    ),
    Project(
        name="log-insight",
        title="Log Insight Dashboard",
        technologies="Go, Loki, Grafana, Prometheus",
        description="Log shipping agent and dashboards that turn noisy service "
                    "logs into alertable error-rate metrics.",
    ),
)

EXPERIENCE = (
    Experience(
        company="FutureTech Inc.",
        role="Senior DevOps Engineer",
        period="2021 - Present",
        description="Runs the Kubernetes platform for 40+ services; cut deploy "
                    "time from 40 to 6 minutes with GitOps.",
    ),
    Experience(
        company="CloudNine Solutions",
        role="DevOps Engineer",
        period="2018 - 2021",
        description="Migrated on-prem workloads to AWS with Terraform and built "
                    "the company's first CI/CD pipelines.",
    ),
)

EDUCATION = (
    ("B.Sc. in Computer Engineering", "Bangkok Institute of Technology", "2014 - 2018"),
)

CONTACT = (
    Contact(name="Email", value="hello@devterminal.dev", link="mailto:hello@devterminal.dev"),
    Contact(name="GitHub", value="github.com/dev-user", link="https://github.com"),
    Contact(name="LinkedIn", value="linkedin.com/in/dev-user", link="https://www.linkedin.com"),
)

RESUME_URL = "https://example.com/resume.pdf"


def find_project(name: str):
    """Case-insensitive lookup by project key; None if absent."""
    key = name.lower()
    for project in PROJECTS:
        if project.name.lower() == key:
            return project
    return None


def find_skill(name: str):
    """Case-insensitive lookup by display name, so multi-word names match 'github actions'."""
    key = " ".join(name.split()).lower()
    for skill in SKILL_DETAILS:
        if skill.name.lower() == key:
            return skill
    return None


def get_portfolio_snapshot() -> PortfolioSnapshot:
    return PortfolioSnapshot(
        about_me=ABOUT_ME,
        skills=SKILLS,
        projects=PROJECTS,
        experience=EXPERIENCE,
        contact=CONTACT,
    )
