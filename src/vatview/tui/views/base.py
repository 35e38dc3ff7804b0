from abc import ABC, abstractmethod
from typing import Iterable
from textual.widget import Widget
from vatview.models import Snapshot
from vatview.tui.projector import ProjectedView


class View(ABC):
    name: str

    @abstractmethod
    def render(self, view: ProjectedView, snapshot: Snapshot) -> Iterable[Widget]: ...
