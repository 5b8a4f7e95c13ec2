from contextlib import contextmanager

import jpype
from konlpy import jvm as konlpy_jvm

from hantag.constants import JVM_MAX_HEAP_SIZE
from hantag.errors import *

import logging
L = logging.getLogger("hantag")

PLAIN_SENTENCE = "kr.ac.kaist.swrc.jhannanum.comm.PlainSentence"
SENTENCE = "kr.ac.kaist.swrc.jhannanum.comm.Sentence"
SET_OF_SENTENCES = "kr.ac.kaist.swrc.jhannanum.comm.SetOfSentences"

def init_jvm(jvmpath=None, max_heap_size=JVM_MAX_HEAP_SIZE):
    """Start the JVM with konlpy's classpath (which carries JHannanum), once."""

    if jpype.isJVMStarted():
        return
    L.info(f"Starting JVM (max heap {max_heap_size}MB)...")
    with java_errors("Starting the JVM"):
        konlpy_jvm.init_jvm(jvmpath=jvmpath, max_heap_size=max_heap_size)

def jclass(name):
    # jpype reports a class missing from the classpath as a TypeError
    try:
        return jpype.JClass(name)
    except TypeError as e:
        raise AnalysisError(f"Java class '{name}' is not on the classpath: {e}") from e

@contextmanager
def java_errors(action):
    # surface Java exceptions as AnalysisErrors
    try:
        yield
    except jpype.JException as e:
        raise AnalysisError(f"{action} failed inside the JVM: {e}") from e
