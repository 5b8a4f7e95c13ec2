from abc import ABC, abstractmethod, abstractproperty
from pathlib import Path
from typing import List

from hantag.document import *
from hantag.errors import *

class AnalysisStage(ABC):
    """One step of an analysis pipeline, bound to a configuration resource.

    Every stage takes a list of backend items and returns a list of
    backend items, so the pipeline can drive all of them the same way.
    Loading happens in `open`, which the pipeline calls on activation.
    """

    def __init__(self, kind: StageKind, resource: str):
        self.kind = kind
        self.resource = resource
        self.opened = False

    @property
    def type(self) -> StageType:
        return TypeMap[self.kind]

    @property
    def name(self) -> str:
        return StageFriendlyName[self.kind]

    def resolve(self, root) -> Path:
        path = Path(root) / self.resource
        if not path.is_file():
            raise StageConfigurationError(self.name, f"configuration resource '{self.resource}' does not exist under '{root}'.\nHint: was the model archive extracted into this resource root?")
        return path

    def open(self, root):
        conf = self.resolve(root)
        self.load(Path(root), conf)
        self.opened = True

    def close(self):
        if self.opened:
            self.opened = False
            self.release()

    def load(self, root: Path, conf: Path):
        pass

    def release(self):
        pass

    @abstractmethod
    def run(self, items: List) -> List:
        pass

    def __repr__(self):
        return f"{type(self).__name__}(kind={self.kind.name}, resource='{self.resource}')"

class AnalyzerBackend(ABC):
    """An external analyzer engine that supplies stages.

    The backend turns raw text into the items its first stage consumes,
    and the items its last stage produces into NativeSentences.
    """

    @abstractproperty
    def source(self) -> AnalyzerSource:
        pass

    @abstractmethod
    def stage(self, kind: StageKind, resource: str) -> AnalysisStage:
        pass

    def start(self):
        # bring up whatever runtime the stages need
        return

    @abstractmethod
    def encode(self, text: str) -> List:
        pass

    @abstractmethod
    def decode(self, item) -> NativeSentence:
        pass
