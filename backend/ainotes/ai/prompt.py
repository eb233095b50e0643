from __future__ import annotations

from typing import Sequence

HISTORY_HEADER = "Here is our conversation history for context:\n\n"

PREAMBLE = (
    "You are an AI assistant helping a student with their notes. Your primary task is to "
    "answer questions about the notes provided. You may also answer with content that is "
    "not present in the notes, as long as it is related to their topic."
)

INSTRUCTIONS = """Important instructions:
1. The answer should be relevant to the notes.
2. Identify which note(s) contain information relevant to the question.
3. If the user asks for study materials (MCQs, quizzes), generate them strictly based on the notes the user is asking about.
4. Do **NOT** use markdown, code blocks, or wrap responses in triple backticks (e.g., ```html).
5. Format the response in clean HTML with tags like <li>, <ul>, <p>, <br>, <div>, etc. but without explicit ```html declarations."""


def build_history(questions: Sequence[str], responses: Sequence[str]) -> str:
    """Transcript of the previous turns; the latest question is not part of it."""
    if len(questions) <= 1 or not responses:
        return ""

    turns = min(len(questions) - 1, len(responses))
    parts = [HISTORY_HEADER]
    for i in range(turns):
        parts.append(f"USER: {questions[i]}\nASSISTANT: {responses[i]}\n\n")
    return "".join(parts)


def build_prompt(question: str, formatted_notes: str, history: str = "") -> str:
    sections = [PREAMBLE]
    if history:
        sections.append(history.rstrip())
    sections.append(f"Here are the user's notes:\n{formatted_notes}")
    sections.append(f'Current question from user: "{question}"')
    sections.append(INSTRUCTIONS)
    return "\n\n".join(sections)
