from enum import Enum, IntEnum
from typing import Optional, List, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from hantag.errors import *

class AnalyzerSource(str, Enum):
    HNN = "hannanum"
    KKMA = "kkma"
    KMR = "komoran"

class PlainTextAddon(str, Enum):
    SENTENCE_SEGMENT = "segment" # split input into sentences
    INFORMAL_SENTENCE_FILTER = "informal" # drop informal phrases

# The ORDERING of the stage types matters: a pipeline must
# never register a stage whose type is lower than the type
# of the stage registered before it. Within PLAIN_TEXT, the
# kinds run in whatever order the caller listed them.
class StageType(IntEnum):
    PLAIN_TEXT = 0
    MORPH_ANALYSIS = 1
    MORPHEME = 2
    POS_TAGGING = 3
    POS = 4

class StageKind(IntEnum):
    SENTENCE_SEGMENT = 0
    INFORMAL_SENTENCE_FILTER = 1
    MORPH_ANALYZER = 2
    UNKNOWN_MORPH = 3
    POS_TAGGER = 4
    NOUN_EXTRACTOR = 5

TypeMap = {
    StageKind.SENTENCE_SEGMENT: StageType.PLAIN_TEXT,
    StageKind.INFORMAL_SENTENCE_FILTER: StageType.PLAIN_TEXT,
    StageKind.MORPH_ANALYZER: StageType.MORPH_ANALYSIS,
    StageKind.UNKNOWN_MORPH: StageType.MORPHEME,
    StageKind.POS_TAGGER: StageType.POS_TAGGING,
    StageKind.NOUN_EXTRACTOR: StageType.POS,
}

StageFriendlyName = {
    StageKind.SENTENCE_SEGMENT: "Sentence Segmentation",
    StageKind.INFORMAL_SENTENCE_FILTER: "Informal Sentence Filter",
    StageKind.MORPH_ANALYZER: "Morphological Analysis",
    StageKind.UNKNOWN_MORPH: "Unknown Morpheme Processing",
    StageKind.POS_TAGGER: "POS Tagging",
    StageKind.NOUN_EXTRACTOR: "Noun Extraction",
}

AddonKind = {
    PlainTextAddon.SENTENCE_SEGMENT: StageKind.SENTENCE_SEGMENT,
    PlainTextAddon.INFORMAL_SENTENCE_FILTER: StageKind.INFORMAL_SENTENCE_FILTER,
}

class PipelineState(IntEnum):
    CONFIGURING = 0
    ACTIVE = 1

class TaggerConfig(BaseModel):
    """Stage selection of a tagger, fixed at construction."""

    model_config = ConfigDict(frozen=True)

    use_unknown_morph: bool = Field(default=True)
    use_pos_tagger: bool = Field(default=True)
    use_noun_extractor: bool = Field(default=False)
    addons: Tuple[PlainTextAddon, ...] = Field(default=(PlainTextAddon.SENTENCE_SEGMENT,
                                                        PlainTextAddon.INFORMAL_SENTENCE_FILTER))

    @field_validator("addons")
    @classmethod
    def _unique_addons(cls, addons):
        # keep the caller's order, first occurrence wins
        seen = []
        for i in addons:
            if i not in seen:
                seen.append(i)
        return tuple(seen)

    @classmethod
    def morphology(cls, use_unknown_morph, *addons):
        """Morphological analysis only, no POS tagging.

        Parameters
        ----------
        use_unknown_morph : bool
            Whether to post-process unknown morphemes.
        addons : PlainTextAddon
            Plain text preprocessing, run in the given order.

        Returns
        -------
        TaggerConfig
            The configuration.
        """
        
        return cls(use_unknown_morph=use_unknown_morph, use_pos_tagger=False,
                   use_noun_extractor=False, addons=addons)

    @classmethod
    def pos(cls, use_unknown_morph, use_noun_extractor, *addons):
        """Morphological analysis followed by POS tagging.

        Parameters
        ----------
        use_unknown_morph : bool
            Whether to post-process unknown morphemes.
        use_noun_extractor : bool
            Whether to reduce the POS output to nouns.
        addons : PlainTextAddon
            Plain text preprocessing, run in the given order.

        Returns
        -------
        TaggerConfig
            The configuration.
        """

        return cls(use_unknown_morph=use_unknown_morph, use_pos_tagger=True,
                   use_noun_extractor=use_noun_extractor, addons=addons)

# analyzer-shaped results, before normalization
class NativeEojeol(BaseModel):
    morphemes: List[str] = Field(default=[])
    tags: List[str] = Field(default=[])

class NativeSentence(BaseModel):
    length: int = Field(default=0) # word count reported by the analyzer
    plain_eojeols: List[str] = Field(default=[])
    eojeols: List[NativeEojeol] = Field(default=[])

    @classmethod
    def merge(cls, sentences):
        """Join several analyzed sentences into one, keeping word order."""

        merged = cls()
        for i in sentences:
            merged.length += i.length
            merged.plain_eojeols += i.plain_eojeols
            merged.eojeols += i.eojeols
        return merged

class TaggedMorpheme(BaseModel):
    model_config = ConfigDict(frozen=True)

    surface: str
    tag: str
    source: AnalyzerSource

    def __str__(self):
        return f"{self.surface}/{self.tag}"

class TaggedWord(BaseModel):
    model_config = ConfigDict(frozen=True)

    surface: str
    morphemes: Tuple[TaggedMorpheme, ...] = Field(default=())

    def __getitem__(self, indx):
        return self.morphemes[indx]

    def __iter__(self):
        return iter(self.morphemes)

    def __len__(self):
        return len(self.morphemes)

    def __str__(self):
        return "+".join(str(i) for i in self.morphemes)

class TaggedSentence(BaseModel):
    model_config = ConfigDict(frozen=True)

    words: Tuple[TaggedWord, ...] = Field(default=())

    def __getitem__(self, indx):
        return self.words[indx]

    def __iter__(self):
        return iter(self.words)

    def __len__(self):
        return len(self.words)

    def __str__(self):
        return " ".join(str(i) for i in self.words)

    @property
    def surface(self) -> str:
        return " ".join(i.surface for i in self.words)

    def morphemes(self, tag_prefix: Optional[str] = None) -> List[TaggedMorpheme]:
        """Flattened morphemes of the sentence, in order.

        Parameters
        ----------
        tag_prefix : Optional[str]
            If given, only keep morphemes whose tag starts with it
            (i.e. "N" for the Hannanum noun tags).

        Returns
        -------
        List[TaggedMorpheme]
            The morphemes.
        """

        return [j for i in self.words for j in i.morphemes
                if tag_prefix is None or j.tag.startswith(tag_prefix)]
