"""
module termdialog.theme.styles.tokyonightdark

Contains the definition of the 'tokyo-night-dark' custom built-in color scheme
"""

from pygments.style import Style
from pygments.token import Token


class TokyoNightDark(Style):
    # pylint: disable=missing-class-docstring, too-few-public-methods

    styles = {
        Token: "",
        Token.Comment: "#646B8A",
        Token.Error: "#F7768E",
        Token.Keyword: "#89DDFF",
        Token.Literal.String.Symbol: "#BB9AF7",
        Token.Name.Builtin: "#7AA2F7",
        Token.Name.Label: "#E0AF68",
        Token.Text: "#DFE4FA",
    }
