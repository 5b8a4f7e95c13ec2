from hantag.pipelines.base import *
from hantag.pipelines.hannanum.jvm import jclass, java_errors
from hantag.document import *

PLUGINS = {
    StageKind.SENTENCE_SEGMENT: "kr.ac.kaist.swrc.jhannanum.plugin.SupplementPlugin.PlainTextProcessor.SentenceSegmentor.SentenceSegmentor",
    StageKind.INFORMAL_SENTENCE_FILTER: "kr.ac.kaist.swrc.jhannanum.plugin.SupplementPlugin.PlainTextProcessor.InformalSentenceFilter.InformalSentenceFilter",
    StageKind.MORPH_ANALYZER: "kr.ac.kaist.swrc.jhannanum.plugin.MajorPlugin.MorphAnalyzer.ChartMorphAnalyzer.ChartMorphAnalyzer",
    StageKind.UNKNOWN_MORPH: "kr.ac.kaist.swrc.jhannanum.plugin.SupplementPlugin.MorphemeProcessor.UnknownMorphProcessor.UnknownProcessor",
    StageKind.POS_TAGGER: "kr.ac.kaist.swrc.jhannanum.plugin.MajorPlugin.PosTagger.HmmPosTagger.HMMTagger",
    StageKind.NOUN_EXTRACTOR: "kr.ac.kaist.swrc.jhannanum.plugin.SupplementPlugin.PosProcessor.NounExtractor.NounExtractor",
}

class HannanumStage(AnalysisStage):
    """A stage backed by one JHannanum plugin instance."""

    def __init__(self, kind, resource):
        super().__init__(kind, resource)
        self.plugin = None

    def load(self, root, conf):
        with java_errors(f"Initializing '{self.name}'"):
            plugin = jclass(PLUGINS[self.kind])()
            plugin.initialize(str(root), str(conf))
        self.plugin = plugin

    def release(self):
        plugin, self.plugin = self.plugin, None
        with java_errors(f"Shutting down '{self.name}'"):
            plugin.shutdown()

    def run(self, items):
        with java_errors(f"Stage '{self.name}'"):
            return self.process(items)

    def process(self, items):
        raise NotImplementedError(f"Hannanum stage does not implement processing! Stage='{self}'")

class PlainTextStage(HannanumStage):
    """PlainSentence -> PlainSentence(s); may split, merge or drop input."""

    def process(self, items):
        results = []
        for ps in items:
            out = self.plugin.doProcess(ps)
            if out is not None:
                results.append(out)
            # a segmentor holds back whatever follows the first sentence
            while self.plugin.hasRemainingData():
                out = self.plugin.doProcess(None)
                if out is not None:
                    results.append(out)

        out = self.plugin.flush()
        if out is not None:
            results.append(out)
        return results

class MappingStage(HannanumStage):
    """Applies one plugin method to every item, dropping null results."""

    method = None

    def process(self, items):
        apply = getattr(self.plugin, self.method)
        results = []
        for i in items:
            out = apply(i)
            if out is not None:
                results.append(out)
        return results

class MorphAnalyzerStage(MappingStage):
    method = "morphAnalyze" # PlainSentence -> SetOfSentences

class MorphemeStage(MappingStage):
    method = "doProcess" # SetOfSentences -> SetOfSentences

class PosTaggerStage(MappingStage):
    method = "tagPOS" # SetOfSentences -> Sentence

class PosStage(MappingStage):
    method = "doProcess" # Sentence -> Sentence

STAGES = {
    StageType.PLAIN_TEXT: PlainTextStage,
    StageType.MORPH_ANALYSIS: MorphAnalyzerStage,
    StageType.MORPHEME: MorphemeStage,
    StageType.POS_TAGGING: PosTaggerStage,
    StageType.POS: PosStage,
}
