"""Captcha challenge value object.

Puzzle generation lives outside the engine; the login flow only checks an
answer against a challenge handed to it by the caller.
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class CaptchaChallenge:
    """Arithmetic captcha issued to the caller.

    Attributes:
        question: Text shown to the user (e.g. "3 + 4").
        answer: Expected integer answer.
    """

    question: str
    answer: int

    def is_solved_by(self, response: str | int | None) -> bool:
        """Check a user response.

        Accepts an int or a string holding an integer (surrounding whitespace
        allowed). Anything unparsable counts as a wrong answer.

        Example:
            >>> CaptchaChallenge(question="3 + 4", answer=7).is_solved_by(" 7 ")
            True
        """
        if response is None or isinstance(response, bool):
            return False
        if isinstance(response, int):
            return response == self.answer
        try:
            return int(response.strip()) == self.answer
        except ValueError:
            return False
