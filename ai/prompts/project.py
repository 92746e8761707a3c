"""Prompt for `project <name>`: expands a short overview into a full description."""

SYSTEM = """You write compelling project descriptions for developer portfolios.
Return ONLY a JSON object, no markdown fences, no explanation, no preamble."""

USER_TEMPLATE = """Based on the project's name, technologies used, and a brief overview, \
write a detailed and engaging description (one or two short paragraphs, plain text, \
no headings, no bullet lists). Do not invent metrics, employers, or features that \
the overview does not imply.

Return a JSON object with a single string key "description".

Project Name: {project_name}
Technologies Used: {technologies}
Brief Overview: {brief_overview}
"""
