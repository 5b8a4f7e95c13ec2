"""
tagger.py
Analyzer-agnostic tagging interface and its pipeline-backed implementation
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from hantag.document import *
from hantag.errors import *
from hantag.models.bootstrap import ensure_resources_extracted
from hantag.pipelines.dispatch import dispatch_pipeline
from hantag.pipelines.normalize import normalize, normalize_all
from hantag.utils.config import config_read, jvm_options

import logging
L = logging.getLogger('hantag')

class Tagger(ABC):
    """Korean POS tagger, whatever analyzer sits behind it."""

    @abstractmethod
    def analyze_sentence(self, text: str) -> TaggedSentence:
        pass

    @abstractmethod
    def analyze_paragraph(self, text: str) -> List[TaggedSentence]:
        pass

    def close(self):
        return

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

class PipelineTagger(Tagger):
    def __init__(self, backend, config: Optional[TaggerConfig] = None,
                 root=None, archive=None, settings=None, **resource_overrides):
        """Create a tagger that runs an AnalysisPipeline.

        Parameters
        ----------
        backend : AnalyzerBackend
            The analyzer supplying the stages.
        config : Optional[TaggerConfig]
            Stage selection; defaults to TaggerConfig().
        root : Optional[str]
            Resource root; defaults to the configured one.
        archive : Optional[str]
            Model archive to extract, if not the default.
        settings : Optional[configparser.ConfigParser]
            The hantag configuration; read from disk if not given.

        kwargs
        ------
        Per-stage configuration resource overrides, see `dispatch_pipeline`.
        """

        self.config = config if config is not None else TaggerConfig()
        self.backend = backend
        settings = settings if settings is not None else config_read()

        self.bootstrap = ensure_resources_extracted(root=root, archive=archive, config=settings)
        # a previous tagger may have extracted somewhere else
        self.root = root if root is not None else self.bootstrap.root

        self.pipeline = dispatch_pipeline(self.config, backend, self.root, **resource_overrides)

    def analyze_sentence(self, text):
        """Tag text as one sentence.

        Parameters
        ----------
        text : str
            The sentence.

        Returns
        -------
        TaggedSentence
            The tagged sentence, which has no words if the text is blank.
        """
        
        return normalize(self.pipeline.analyze_sentence(text), self.backend.source)

    def analyze_paragraph(self, text):
        """Tag text as a sequence of sentences.

        Parameters
        ----------
        text : str
            The paragraph.

        Returns
        -------
        List[TaggedSentence]
            The tagged sentences, in document order.
        """

        return normalize_all(self.pipeline.analyze_paragraph(text), self.backend.source)

    def close(self):
        self.pipeline.close()

class HannanumTagger(PipelineTagger):
    def __init__(self, config: Optional[TaggerConfig] = None, root=None, archive=None,
                 settings=None, backend=None, **resource_overrides):
        settings = settings if settings is not None else config_read()

        if backend is None:
            from hantag.pipelines.hannanum import HannanumBackend
            jvm_path, heap = jvm_options(settings)
            backend = HannanumBackend(jvm_path=jvm_path, max_heap_size=heap)

        super().__init__(backend, config, root=root, archive=archive,
                         settings=settings, **resource_overrides)
