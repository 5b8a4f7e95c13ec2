
# name of the model archive, looked up in the working directory
# first and then in the bundled resources folder
ARCHIVE_NAME = "models.zip"

# default configuration resources of each Hannanum plugin, relative
# to the resource root that the model archive is extracted into
HNN_SENTENCE_SEGMENT = "conf/plugin/SupplementPlugin/PlainTextProcessor/SentenceSegment.json"
HNN_INFORMAL_SENTENCE_FILTER = "conf/plugin/SupplementPlugin/PlainTextProcessor/InformalSentenceFilter.json"
HNN_CHART_MORPH_ANALYZER = "conf/plugin/MajorPlugin/MorphAnalyzer/ChartMorphAnalyzer.json"
HNN_UNKNOWN_MORPH = "conf/plugin/SupplementPlugin/MorphemeProcessor/UnknownMorphProcessor.json"
HNN_HMM_POS_TAGGER = "conf/plugin/MajorPlugin/PosTagger/HmmPosTagger.json"
HNN_NOUN_EXTRACTOR = "conf/plugin/SupplementPlugin/PosTagger/NounExtractor.json"

# JVM defaults, same as konlpy
JVM_MAX_HEAP_SIZE = 1024
