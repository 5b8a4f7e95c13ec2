import pytest
from pydantic import ValidationError

from hantag.document import *

WORD = TaggedWord(surface="밥을",
                  morphemes=(TaggedMorpheme(surface="밥", tag="NC", source=AnalyzerSource.HNN),
                             TaggedMorpheme(surface="을", tag="JC", source=AnalyzerSource.HNN)))
VERB = TaggedWord(surface="먹었다.",
                  morphemes=(TaggedMorpheme(surface="먹", tag="PV", source=AnalyzerSource.HNN),
                             TaggedMorpheme(surface="었", tag="EP", source=AnalyzerSource.HNN),
                             TaggedMorpheme(surface="다", tag="EF", source=AnalyzerSource.HNN),
                             TaggedMorpheme(surface=".", tag="SF", source=AnalyzerSource.HNN)))
SENTENCE = TaggedSentence(words=(WORD, VERB))

def test_stringification():
    assert str(WORD[0]) == "밥/NC"
    assert str(WORD) == "밥/NC+을/JC"
    assert str(SENTENCE) == "밥/NC+을/JC 먹/PV+었/EP+다/EF+./SF"
    assert SENTENCE.surface == "밥을 먹었다."

def test_sequence_access():
    assert len(SENTENCE) == 2
    assert [i.surface for i in SENTENCE] == ["밥을", "먹었다."]
    assert [i.surface for i in WORD] == ["밥", "을"]
    assert SENTENCE[1][0].tag == "PV"

def test_morphemes():
    assert [i.surface for i in SENTENCE.morphemes()] == ["밥", "을", "먹", "었", "다", "."]
    assert [i.surface for i in SENTENCE.morphemes("N")] == ["밥"]

def test_immutability():
    with pytest.raises(ValidationError):
        WORD.surface = "국을"
    with pytest.raises(ValidationError):
        WORD[0].tag = "NP"
    with pytest.raises(ValidationError):
        SENTENCE.words = ()

def test_dump():
    dumped = SENTENCE.model_dump(mode="json")

    assert dumped["words"][0]["morphemes"][0] == {"surface": "밥", "tag": "NC", "source": "hannanum"}
    assert TaggedSentence.model_validate(dumped) == SENTENCE

def test_config_defaults():
    config = TaggerConfig()

    assert config.use_unknown_morph
    assert config.use_pos_tagger
    assert not config.use_noun_extractor
    assert config.addons == (PlainTextAddon.SENTENCE_SEGMENT, PlainTextAddon.INFORMAL_SENTENCE_FILTER)

def test_config_modes():
    config = TaggerConfig.morphology(False, PlainTextAddon.INFORMAL_SENTENCE_FILTER)
    assert not config.use_pos_tagger
    assert not config.use_noun_extractor
    assert config.addons == (PlainTextAddon.INFORMAL_SENTENCE_FILTER,)

    config = TaggerConfig.pos(True, True)
    assert config.use_pos_tagger
    assert config.use_noun_extractor
    assert config.addons == ()

def test_config_addons():
    config = TaggerConfig(addons=["informal", "segment", "informal"])

    assert config.addons == (PlainTextAddon.INFORMAL_SENTENCE_FILTER, PlainTextAddon.SENTENCE_SEGMENT)

    with pytest.raises(ValidationError):
        config.use_pos_tagger = False

def test_native_merge():
    merged = NativeSentence.merge([
        NativeSentence(length=1, plain_eojeols=["밥을"], eojeols=[NativeEojeol(morphemes=["밥", "을"], tags=["NC", "JC"])]),
        NativeSentence(length=1, plain_eojeols=["갔다."], eojeols=[NativeEojeol(morphemes=["가"], tags=["PV"])]),
    ])

    assert merged.length == 2
    assert merged.plain_eojeols == ["밥을", "갔다."]
    assert merged.eojeols[1].morphemes == ["가"]

def test_stage_types():
    assert [TypeMap[i] for i in StageKind] == sorted(TypeMap[i] for i in StageKind)
    assert set(StageFriendlyName) == set(StageKind)
