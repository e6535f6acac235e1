"""
module termdialog.theme.themerenderer

Contains the definition of the ThemeRenderer class, the adapter that turns the
semantic draw requests of a prompt into terminal writes while keeping track of how
many lines it has drawn so they can be cleared again before the next redraw
"""

from prompt_toolkit.formatted_text import FormattedText, fragment_list_to_text

from .abstract import Theme
from .enums import SelectionStyle
from ..terminal.abstract import Terminal


class ThemeRenderer:
    """
    class ThemeRenderer

    Adapter that turns the semantic draw requests of a prompt into terminal writes.
    The renderer counts the lines produced by each draw in height so that clear()
    can erase exactly the region that was drawn.

    Prompt lines are handled in one of two ways. By default, drawing a prompt line
    records everything drawn so far as the prompt height and restarts the line count
    at zero. If prompts_reset_height is disabled, prompt lines are not counted and the
    fixed prompt_height is assumed instead, which lets a menu redraw a variable number
    of entries below a single prompt line.
    """

    __drawn: bool
    __terminal: Terminal
    __theme: Theme
    height: int
    prompt_height: int
    prompts_reset_height: bool

    def __init__(self: "ThemeRenderer", terminal: Terminal, theme: Theme) -> None:
        self.__drawn = False
        self.__terminal = terminal
        self.__theme = theme
        self.height = 0
        self.prompt_height = 0
        self.prompts_reset_height = True

    def add_line(self: "ThemeRenderer") -> None:
        """
        Accounts for a line that was produced outside of the renderer (i.e., the
        line the user typed in response to a prompt)

        Args:
            None

        Returns:
            Nothing

        Raises:
            Nothing
        """

        self.height += 1
        self.__drawn = True

    def clear(self: "ThemeRenderer") -> None:
        """
        Erases every line drawn since the last clear along with the prompt height
        and resets the line count to zero. Does nothing if nothing was drawn

        Args:
            None

        Returns:
            Nothing

        Raises:
            OSError: If the terminal could not be written to
        """

        if self.__drawn:
            self.__terminal.clear_last_lines(self.height + self.prompt_height)

        self.height = 0
        self.__drawn = False

        # a recorded prompt height was erased along with everything else while a
        # fixed prompt height still applies to the next frame
        if self.prompts_reset_height:
            self.prompt_height = 0

    def clear_to(self: "ThemeRenderer", height: int) -> None:
        """
        Erases the lines drawn after the line count was at the provided height and
        restores the line count to it, leaving earlier lines on screen

        Args:
            height (int): A line count previously read from height

        Returns:
            Nothing

        Raises:
            OSError: If the terminal could not be written to
        """

        if self.height > height:
            self.__terminal.clear_last_lines(self.height - height)
            self.height = height

    def confirmation_prompt(
        self: "ThemeRenderer", prompt: str, default: bool | None
    ) -> None:
        self._write_formatted_str(
            self.__theme.format_confirmation_prompt(prompt, default)
        )

    def confirmation_prompt_selection(
        self: "ThemeRenderer", prompt: str, selection: bool
    ) -> None:
        self._write_formatted_prompt(
            self.__theme.format_confirmation_prompt_selection(prompt, selection)
        )

    def error(self: "ThemeRenderer", error: str) -> None:
        self._write_formatted_line(self.__theme.format_error(error))

    def input_prompt(self: "ThemeRenderer", prompt: str, default: str | None) -> None:
        self._write_formatted_str(
            self.__theme.format_singleline_prompt(prompt, default)
        )

    def password_prompt(self: "ThemeRenderer", prompt: str) -> None:
        self._write_formatted_str(self.__theme.format_password_prompt(prompt))

    def password_prompt_selection(self: "ThemeRenderer", prompt: str) -> None:
        self._write_formatted_prompt(
            self.__theme.format_password_prompt_selection(prompt)
        )

    def prompt(self: "ThemeRenderer", prompt: str) -> None:
        self._write_formatted_prompt(self.__theme.format_prompt(prompt))

    def selection(self: "ThemeRenderer", text: str, style: SelectionStyle) -> None:
        self._write_formatted_line(self.__theme.format_selection(text, style))

    def set_prompt_height(self: "ThemeRenderer", prompt_height: int) -> None:
        self.prompt_height = prompt_height

    def set_prompts_reset_height(self: "ThemeRenderer", reset_height: bool) -> None:
        self.prompts_reset_height = reset_height

    def single_prompt_selection(
        self: "ThemeRenderer", prompt: str, selection: str
    ) -> None:
        self._write_formatted_prompt(
            self.__theme.format_single_prompt_selection(prompt, selection)
        )

    @property
    def terminal(self: "ThemeRenderer") -> Terminal:
        return self.__terminal

    @property
    def theme(self: "ThemeRenderer") -> Theme:
        return self.__theme

    def _write(self: "ThemeRenderer", text: FormattedText, counted: bool) -> None:
        self.__terminal.write_formatted(text, style=self.__theme.style)
        self.__drawn = True

        if counted:
            self.height += fragment_list_to_text(text).count("\n")

    def _write_formatted_line(self: "ThemeRenderer", text: FormattedText) -> None:
        self._write(FormattedText([*text, ("", "\n")]), counted=True)

    def _write_formatted_prompt(self: "ThemeRenderer", text: FormattedText) -> None:
        line: FormattedText = FormattedText([*text, ("", "\n")])

        if not self.prompts_reset_height:
            self._write(line, counted=False)
            return

        self._write(line, counted=True)
        self.prompt_height = self.height
        self.height = 0

    def _write_formatted_str(self: "ThemeRenderer", text: FormattedText) -> None:
        self._write(text, counted=True)
