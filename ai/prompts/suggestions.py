"""Prompt for the clickable "ask" suggestions shown under the terminal."""

SYSTEM = """You are a portfolio prompt generator. Follow instructions exactly and \
output only valid JSON with the specified shape. Never wrap it in markdown fences."""

USER_TEMPLATE = """You generate concise, high-quality "ask" prompt suggestions for a portfolio terminal.

### INSTRUCTIONS
1. Use ONLY the data in PORTFOLIO CONTEXT.
2. Output exactly 4 prompt suggestions.
3. Each suggestion must have:
   - label: 2-4 words, title case, no quotes.
   - question: 8-16 words, no quotes, phrased as a recruiter question.
4. Ensure variety across impact, projects, systems, automation, and experience.
5. Do not include commands, markdown, or extra keys.
6. Use the randomization seed to vary selection/order each call.
7. Output strictly valid JSON only.

### RANDOMIZATION SEED
{seed}

### PORTFOLIO CONTEXT
\"\"\"
{portfolio}
\"\"\"

### RESPONSE FORMAT
{{"prompts": [{{"label": "", "question": ""}}]}}
"""
