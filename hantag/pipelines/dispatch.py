"""
dispatch.py
Turns a TaggerConfig into a fully registered AnalysisPipeline
"""

from typing import List

from hantag.pipelines.pipeline import AnalysisPipeline
from hantag.document import *
from hantag.constants import *
from hantag.errors import *

import logging
L = logging.getLogger('hantag')

# configuration resource of each stage, relative to the resource
# root; to swap one, pass its lowercased kind as a kwarg to dispatch
DEFAULT_RESOURCES = {
    StageKind.SENTENCE_SEGMENT: HNN_SENTENCE_SEGMENT,
    StageKind.INFORMAL_SENTENCE_FILTER: HNN_INFORMAL_SENTENCE_FILTER,
    StageKind.MORPH_ANALYZER: HNN_CHART_MORPH_ANALYZER,
    StageKind.UNKNOWN_MORPH: HNN_UNKNOWN_MORPH,
    StageKind.POS_TAGGER: HNN_HMM_POS_TAGGER,
    StageKind.NOUN_EXTRACTOR: HNN_NOUN_EXTRACTOR,
}

def resolve_stage_kinds(config: TaggerConfig) -> List[StageKind]:
    """List the stages a configuration asks for, in run order.

    Parameters
    ----------
    config : TaggerConfig
        The stage selection.

    Returns
    -------
    List[StageKind]
        Plain text addons (caller order), the morphological analyzer,
        then the optional unknown morpheme processor, POS tagger and
        noun extractor.
    """

    if config.use_noun_extractor and not config.use_pos_tagger:
        raise StageConfigurationError(StageFriendlyName[StageKind.NOUN_EXTRACTOR],
                                      "noun extraction operates on POS tagger output, but POS tagging is disabled.")

    kinds = [AddonKind[i] for i in config.addons]
    kinds.append(StageKind.MORPH_ANALYZER)
    if config.use_unknown_morph:
        kinds.append(StageKind.UNKNOWN_MORPH)
    if config.use_pos_tagger:
        kinds.append(StageKind.POS_TAGGER)
        if config.use_noun_extractor:
            kinds.append(StageKind.NOUN_EXTRACTOR)

    return kinds

def dispatch_pipeline(config, backend, root, **resource_overrides):
    """Build the pipeline for a configuration.

    Every stage's resource is checked before anything is registered, so
    either the whole pipeline is returned or nothing is.

    Parameters
    ----------
    config : TaggerConfig
        The stage selection.
    backend : AnalyzerBackend
        The engine supplying the stages.
    root : str
        Resource root that stage resources are relative to.
    resource_overrides: dict
        Resource path to use instead of the default, keyed by
        lowercased stage kind; i.e. `pos_tagger="conf/my_hmm.json"`.

    Returns
    -------
    AnalysisPipeline
        The configured, not yet active, pipeline.
    """

    unknown = set(resource_overrides) - {i.name.lower() for i in StageKind}
    if len(unknown) > 0:
        raise StageConfigurationError(", ".join(sorted(unknown)), "no such stage to override.")

    kinds = resolve_stage_kinds(config)
    L.debug(f"Resolved stages {[i.name for i in kinds]} from {config}")

    stages = []
    for kind in kinds:
        resource = resource_overrides.get(kind.name.lower(), DEFAULT_RESOURCES[kind])
        stage = backend.stage(kind, resource)
        stage.resolve(root)
        stages.append(stage)

    pipeline = AnalysisPipeline(backend, root, *stages)
    pipeline.validate()

    L.debug(f"Done building pipeline: {pipeline}")
    return pipeline
