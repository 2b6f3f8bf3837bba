from scriptwiki.help.comment_help import CommentHelpParser
from scriptwiki.help.extractor import HelpExtractor
from scriptwiki.help.parser import HelpParser

__all__ = ["CommentHelpParser", "HelpExtractor", "HelpParser"]
