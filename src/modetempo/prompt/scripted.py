"""Non-interactive prompt answering from a prepared script."""

from collections import deque
from typing import Iterable, List, Optional, Sequence

from ..core.base import UIPrompt


class ScriptedPrompt(UIPrompt):
    """
    Answers selections from a queue; ``None`` in the queue means cancel.

    Once the queue is empty every further selection is cancelled. All
    offered label lists and notices are recorded.
    """

    def __init__(self, answers: Optional[Iterable[Optional[str]]] = None):
        self.answers = deque(answers or [])
        self.offered: List[List[str]] = []
        self.notices: List[str] = []

    def choose_one(self, labels: Sequence[str]) -> Optional[str]:
        self.offered.append(list(labels))
        if not self.answers:
            return None
        answer = self.answers.popleft()
        if answer is not None and answer not in labels:
            return None
        return answer

    def notify(self, message: str) -> None:
        self.notices.append(message)
