from pygments.style import Style
from pygments.token import Keyword, Name, Number, Punctuation, String


class LogStyle(Style):
    """muted palette for the JSON blob appended to log lines"""

    styles = {
        Punctuation: "#6c6c6c",
        Name.Tag: "#5f87af",
        String.Double: "#87af87",
        Number: "#d7af5f",
        Keyword.Constant: "#af87af",
    }
