from scriptwiki.menu.report import print_report

__all__ = ["print_report"]
