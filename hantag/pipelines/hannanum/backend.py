from hantag.pipelines.base import *
from hantag.pipelines.hannanum.jvm import *
from hantag.pipelines.hannanum.stages import STAGES
from hantag.document import *
from hantag.constants import JVM_MAX_HEAP_SIZE

class HannanumBackend(AnalyzerBackend):
    """KAIST JHannanum, run plugin by plugin through jpype."""

    source = AnalyzerSource.HNN

    def __init__(self, jvm_path=None, max_heap_size=JVM_MAX_HEAP_SIZE):
        self.jvm_path = jvm_path
        self.max_heap_size = max_heap_size

    def stage(self, kind, resource):
        return STAGES[TypeMap[kind]](kind, resource)

    def start(self):
        init_jvm(self.jvm_path, self.max_heap_size)

    def encode(self, text):
        # one PlainSentence per non-blank line, the last one ends the document
        PlainSentence = jclass(PLAIN_SENTENCE)
        lines = [i for i in text.split("\n") if i.strip() != ""]
        return [PlainSentence(0, indx, indx == len(lines)-1, line)
                for indx, line in enumerate(lines)]

    def decode(self, item):
        with java_errors("Reading Hannanum output"):
            if isinstance(item, jclass(SENTENCE)):
                plain = [str(i) for i in item.getPlainEojeols()]
                eojeols = [NativeEojeol(morphemes=[str(m) for m in i.getMorphemes()],
                                        tags=[str(t) for t in i.getTags()])
                           for i in item.getEojeols()]
            elif isinstance(item, jclass(SET_OF_SENTENCES)):
                # without a POS tagger every word keeps all its candidate
                # analyses; the first one is the analyzer's preferred one
                plain = [str(i) for i in item.getPlainEojeolArray()]
                eojeols = []
                for candidates in item.getEojeolSetArray():
                    if len(candidates) == 0:
                        eojeols.append(NativeEojeol())
                        continue
                    eojeols.append(NativeEojeol(morphemes=[str(m) for m in candidates[0].getMorphemes()],
                                                tags=[str(t) for t in candidates[0].getTags()]))
            else:
                raise AnalysisError(f"Hannanum pipeline produced an unexpected result type: '{type(item)}'")

            return NativeSentence(length=int(item.length), plain_eojeols=plain, eojeols=eojeols)
