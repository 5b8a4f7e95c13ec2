from typing import List

from hantag.document import *
from hantag.errors import *

def normalize(native: NativeSentence, source: AnalyzerSource) -> TaggedSentence:
    """Convert an analyzer-shaped sentence into a TaggedSentence.

    Parameters
    ----------
    native : NativeSentence
        The sentence as reported by the analyzer.
    source : AnalyzerSource
        The analyzer to stamp every morpheme with.

    Returns
    -------
    TaggedSentence
        The normalized sentence, in analyzer order.

    Raises
    ------
    AnalysisError
        If the reported counts disagree with each other.
    """

    if not (native.length == len(native.plain_eojeols) == len(native.eojeols)):
        raise AnalysisError(f"Analyzer reported {native.length} words, but returned {len(native.plain_eojeols)} surface forms and {len(native.eojeols)} analyses.")

    words = []
    for surface, eojeol in zip(native.plain_eojeols, native.eojeols):
        if len(eojeol.morphemes) != len(eojeol.tags):
            raise AnalysisError(f"Analyzer returned {len(eojeol.morphemes)} morphemes but {len(eojeol.tags)} tags for word '{surface}'.")

        morphemes = [TaggedMorpheme(surface=m, tag=t, source=source)
                     for m, t in zip(eojeol.morphemes, eojeol.tags)]
        words.append(TaggedWord(surface=surface, morphemes=tuple(morphemes)))

    return TaggedSentence(words=tuple(words))

def normalize_all(natives, source: AnalyzerSource) -> List[TaggedSentence]:
    return [normalize(i, source) for i in natives]
