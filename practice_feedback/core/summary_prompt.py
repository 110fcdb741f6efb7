"""Summary Prompt: deterministic prompt assembly and fallback texts.

Invariants:
    - Same answers in the same order always produce the same prompt
    - Respondents are numbered from 1 in submission order ("Player 1 Responses:")
    - One "- {answer}" line per answer, in question-submission order
    - Respondent identity (ids, names, emails) never enters the prompt

Design Decisions:
    - Prompt built from plain answer lists, not entity models: keeps core free
      of schema imports and makes the builder trivially testable
"""

from collections.abc import Sequence

NO_RESPONSES_SUMMARY = "No responses were submitted for this practice session."

CONNECTION_TEST_PROMPT = (
    'Hello, this is a connection test. Please respond with "Connection successful".'
)

_PREAMBLE = (
    "You are analyzing volleyball practice feedback from players. "
    "Please provide a concise summary of the key themes, insights, and areas "
    "for improvement based on the following player responses."
)

_INSTRUCTIONS = """Please provide a summary that includes:
1. Overall performance themes
2. Common challenges mentioned
3. Skills that players focused on
4. Areas for improvement in future practices
5. Any notable individual insights

Keep the summary concise but informative, focusing on actionable insights for the coach."""


def build_summary_prompt(answer_sets: Sequence[Sequence[str]]) -> str:
    """Embed every respondent's answers, grouped by respondent."""
    blocks = []
    for index, answers in enumerate(answer_sets, start=1):
        lines = "\n".join(f"- {answer}" for answer in answers)
        blocks.append(f"Player {index} Responses:\n{lines}")

    prompt = "\n\n".join([
        _PREAMBLE,
        "Practice Responses:",
        "\n\n".join(blocks),
        _INSTRUCTIONS,
    ])
    return prompt.strip()


def format_generation_failure(error: Exception | str) -> str:
    description = str(error) or type(error).__name__
    return (
        f"Error generating AI summary: {description}. "
        "Manual review of responses may be needed."
    )
