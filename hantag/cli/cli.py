"""
cli.py
The hantag command-line interface
"""

import rich_click as click
import functools
import json

from pathlib import Path

from rich.traceback import install
from rich.console import Console
from rich.logging import RichHandler

from hantag.document import *
from hantag.errors import *
from hantag.tagger import HannanumTagger
from hantag.utils import config

import logging as L
hL = L.getLogger('hantag')

C = Console()

with open(Path(__file__).parent.parent / "version", 'r') as df:
    VERSION_NUMBER, RELEASE_DATE, RELEASE_NOTES = df.readlines()[:3]

#################### OPTIONS ################################

# stage selection options shared by all commands
def tagger_options(f):
    options = [
        click.option("--unknown/--no-unknown", default=True,
                     help="Post-process morphemes the dictionary does not know."),
        click.option("--pos/--no-pos", default=True,
                     help="Run the POS tagger after morphological analysis."),
        click.option("--nouns", is_flag=True, default=False,
                     help="Keep only nouns in the POS tagger output (needs --pos)."),
        click.option("--addon", "addons", multiple=True,
                     type=click.Choice([i.value for i in PlainTextAddon]),
                     help="Plain text preprocessing to run, in the given order. Default: segment, informal."),
        click.option("--no-addons", is_flag=True, default=False,
                     help="Run no plain text preprocessing at all."),
        click.option("--root", type=click.Path(file_okay=False),
                     help="Directory the model resources are (or get) extracted into."),
        click.option("--json", "as_json", is_flag=True, default=False,
                     help="Print the tagged sentences as JSON."),
    ]

    options.reverse()
    return functools.reduce(lambda x, opt: opt(x), options, f)

###################### UTILS ##############################

def handle_verbosity(verbosity):
    L.getLogger('hantag').setLevel(L.WARN)

    if verbosity >= 1:
        L.basicConfig(format="%(message)s", level=L.ERROR, handlers=[RichHandler(rich_tracebacks=True)], force=True)
        L.getLogger('hantag').setLevel(L.INFO)
    if verbosity >= 2:
        L.getLogger('hantag').setLevel(L.DEBUG)

def build_config(unknown, pos, nouns, addons, no_addons):
    if no_addons:
        addons = ()
    elif len(addons) == 0:
        addons = TaggerConfig().addons

    return TaggerConfig(use_unknown_morph=unknown, use_pos_tagger=pos,
                        use_noun_extractor=nouns,
                        addons=tuple(PlainTextAddon(i) for i in addons))

def render(sentences, as_json):
    if as_json:
        click.echo(json.dumps([i.model_dump(mode="json") for i in sentences],
                              ensure_ascii=False, indent=2))
        return

    for indx, sentence in enumerate(sentences):
        if indx > 0:
            click.echo("")
        for word in sentence:
            click.echo(f"{word.surface}\t{word}")

def _run(ctx, kwargs, action):
    try:
        cfg = build_config(kwargs["unknown"], kwargs["pos"], kwargs["nouns"],
                           kwargs["addons"], kwargs["no_addons"])
        with HannanumTagger(cfg, root=kwargs.get("root"), settings=ctx.obj["config"]) as tagger:
            sentences = action(tagger)
    except HantagException as e:
        C.print(f"\n[bold red]ERROR[/bold red]: {e}")
        ctx.exit(1)

    render(sentences, kwargs["as_json"])

@click.group()
@click.pass_context
@click.version_option(VERSION_NUMBER.strip())
@click.option("-v", "--verbose", type=int, count=True, default=0, help="How loquacious hantag should be.")
def hantag(ctx, verbose):
    """Tag Korean text with morphemes and parts of speech."""

    ctx.ensure_object(dict)
    handle_verbosity(verbose)
    ctx.obj["verbose"] = verbose
    ctx.obj["config"] = config.config_read(True)
    install()

#################### SENTENCE ################################

@hantag.command()
@click.argument("text", type=str)
@tagger_options
@click.pass_context
def sentence(ctx, text, **kwargs):
    """Tag TEXT as a single sentence."""

    _run(ctx, kwargs, lambda tagger: [tagger.analyze_sentence(text)])

#################### PARAGRAPH ################################

@hantag.command()
@click.argument("text", type=str, required=False)
@click.option("-f", "--file", "path",
              type=click.Path(exists=True, file_okay=True, dir_okay=False),
              help="Read the paragraph from a UTF-8 text file instead.")
@tagger_options
@click.pass_context
def paragraph(ctx, text, path, **kwargs):
    """Tag TEXT (or a file) sentence by sentence."""

    if path is not None:
        with open(path, 'r', encoding='utf-8') as df:
            text = df.read()
    if text is None:
        raise click.UsageError("Provide either TEXT or --file.")

    _run(ctx, kwargs, lambda tagger: tagger.analyze_paragraph(text))
