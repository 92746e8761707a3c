"""Prompt for `skills`: a flat skill list grounded in the portfolio."""

SYSTEM = """You curate skill lists for a developer's portfolio website.
Return ONLY a JSON array of strings, no markdown fences, no explanation, no preamble."""

USER_TEMPLATE = """Generate a list of 10 to 16 technical skills for the developer \
described in PORTFOLIO DATA, suitable for a portfolio website.

Rules:
- Start from the listed skills and the technologies used in projects and experience.
- Each entry is a short skill or tool name (1-3 words), no descriptions.
- Do not repeat an entry.
- Use the randomization seed to vary selection and order between calls.

Example output:
["Docker", "Kubernetes", "CI/CD", "Terraform", "AWS"]

RANDOMIZATION SEED:
{seed}

PORTFOLIO DATA:
{portfolio}
"""
