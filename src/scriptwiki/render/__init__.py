from scriptwiki.render.markdown_writer import MarkdownWriter
from scriptwiki.render.summary import SummaryWriter
from scriptwiki.render.toc import github_toc, prepend_toc

__all__ = ["MarkdownWriter", "SummaryWriter", "github_toc", "prepend_toc"]
