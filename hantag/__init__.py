import logging

# library code only logs; handlers are set up by the CLI
logging.getLogger('hantag').addHandler(logging.NullHandler())

from .errors import *
from .document import *
from .models import *
from .pipelines import *
from .tagger import Tagger, PipelineTagger, HannanumTagger
