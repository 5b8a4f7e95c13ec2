from pathlib import Path
from typing import List
import time

from hantag.pipelines.base import *
from hantag.document import *
from hantag.errors import *

import logging

L = logging.getLogger('hantag')

class AnalysisPipeline:
    """An ordered list of analysis stages over one backend.

    The pipeline starts out CONFIGURING, where stages may be registered.
    The first analyze call switches it to ACTIVE for good: the backend
    is started and every stage is opened (this is where dictionaries
    and models load, so the first call is the slow one). Stages cannot
    be added afterwards.

    A pipeline is not safe to share between threads; use one per worker.
    Use it as a context manager, or call `close()`, to release stages.
    """

    def __init__(self, backend, root, *stages):
        self.__backend = backend
        self.__root = Path(root)
        self.__stages = []
        self.__state = PipelineState.CONFIGURING
        self.__closed = False
        self.__failure = None

        for i in stages:
            self.register(i)

    @property
    def state(self):
        return self.__state

    @property
    def stages(self):
        return tuple(self.__stages)

    @property
    def kinds(self):
        return [i.kind for i in self.__stages]

    @property
    def backend(self):
        return self.__backend

    @property
    def closed(self):
        return self.__closed

    def register(self, stage):
        """Append a stage; only possible while CONFIGURING.

        Parameters
        ----------
        stage : AnalysisStage
            The stage to run after the ones already registered.

        Returns
        -------
        AnalysisPipeline
            This pipeline.
        """

        if self.__state != PipelineState.CONFIGURING:
            raise StageConfigurationError(stage.name, "the pipeline is already active and its stages are frozen.")
        self.__check_stage(stage)

        L.debug(f"Registering stage {len(self.__stages)+1}: {stage}")
        self.__stages.append(stage)
        return self

    def validate(self):
        """Check that the registered stages form a runnable pipeline."""

        if StageType.MORPH_ANALYSIS not in [i.type for i in self.__stages]:
            raise StageConfigurationError(StageFriendlyName[StageKind.MORPH_ANALYZER],
                                          "every pipeline needs exactly one morphological analyzer.")

    def analyze_sentence(self, text: str) -> NativeSentence:
        """Analyze text as a single sentence.

        If a segmentation stage splits the text, the pieces are joined
        back into one sentence in their original order.

        Parameters
        ----------
        text : str
            The sentence.

        Returns
        -------
        NativeSentence
            Analyzer-shaped result; empty if the text is blank.
        """

        self.__activate()
        if text.strip() == "":
            return NativeSentence()

        start = time.perf_counter()
        results = self.__run(text)
        L.debug(f"Analyzed sentence in {time.perf_counter()-start:.4f}s ({len(results)} segment(s))")

        if len(results) == 1:
            return results[0]
        return NativeSentence.merge(results)

    def analyze_paragraph(self, text: str) -> List[NativeSentence]:
        """Analyze text as a sequence of sentences.

        Parameters
        ----------
        text : str
            The paragraph.

        Returns
        -------
        List[NativeSentence]
            One result per detected sentence, in document order.
        """

        self.__activate()
        if text.strip() == "":
            return []

        start = time.perf_counter()
        results = self.__run(text)
        L.debug(f"Analyzed paragraph in {time.perf_counter()-start:.4f}s ({len(results)} sentence(s))")

        return results

    def close(self):
        """Release every opened stage; later calls do nothing."""

        if self.__closed:
            return
        self.__closed = True

        for stage in reversed(self.__stages):
            try:
                stage.close()
            except Exception as e:
                L.warning(f"Failed to release stage '{stage.name}': {e}")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def __repr__(self):
        return f"AnalysisPipeline(state={self.__state.name}, stages={[i.kind.name for i in self.__stages]})"

    def __activate(self):
        if self.__closed:
            raise AnalysisError("Attempted to analyze with a pipeline that was already closed.")
        if self.__failure is not None:
            raise self.__failure
        if self.__state == PipelineState.ACTIVE:
            return

        # one way: a failed activation is not retried
        self.__state = PipelineState.ACTIVE
        L.info(f"Activating pipeline with stages: {[i.name for i in self.__stages]}")

        start = time.perf_counter()
        try:
            self.validate()
            self.__backend.start()
            for stage in self.__stages:
                L.debug(f"Opening stage: {stage}")
                stage.open(self.__root)
        except Exception as e:
            for stage in reversed(self.__stages):
                try:
                    stage.close()
                except Exception as release_error:
                    L.warning(f"Failed to release stage '{stage.name}': {release_error}")
            self.__failure = AnalysisError(f"Failed to activate the analysis pipeline: {e}")
            raise self.__failure from e

        L.debug(f"Pipeline activated in {time.perf_counter()-start:.4f}s")

    def __run(self, text):
        try:
            items = self.__backend.encode(text)
        except AnalysisError:
            raise
        except Exception as e:
            raise AnalysisError(f"Failed to prepare analyzer input: {e}") from e

        for stage in self.__stages:
            if len(items) == 0:
                break
            try:
                items = stage.run(items)
            except AnalysisError:
                raise
            except Exception as e:
                raise AnalysisError(f"Stage '{stage.name}' failed: {e}") from e

        try:
            return [self.__backend.decode(i) for i in items]
        except AnalysisError:
            raise
        except Exception as e:
            raise AnalysisError(f"Failed to read analyzer output: {e}") from e

    def __check_stage(self, stage):
        types = [i.type for i in self.__stages]

        if len(types) > 0 and stage.type < types[-1]:
            raise StageConfigurationError(stage.name, f"cannot run after '{self.__stages[-1].name}'.")
        if stage.type in (StageType.MORPH_ANALYSIS, StageType.POS_TAGGING) and stage.type in types:
            raise StageConfigurationError(stage.name, "a pipeline takes only one stage of this type.")
        if stage.type in (StageType.MORPHEME, StageType.POS_TAGGING) and StageType.MORPH_ANALYSIS not in types:
            raise StageConfigurationError(stage.name, "requires a morphological analyzer before it.")
        if stage.type == StageType.POS and StageType.POS_TAGGING not in types:
            raise StageConfigurationError(stage.name, "operates on POS tagger output, but no POS tagger was registered.")
