from scriptwiki.models.help_model import ExampleBlock, HelpMetadata, ParameterHelp, SECTIONS
from scriptwiki.models.script_model import ScriptFile

__all__ = ["ExampleBlock", "HelpMetadata", "ParameterHelp", "SECTIONS", "ScriptFile"]
