from .cli import hantag
