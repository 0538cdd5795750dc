from typing import Optional, Protocol


class AppHooks(Protocol):
    """
    Protocol for application hooks to follow validation progress.
    This can be implemented by the main application to drive a progress
    bar or status line while a document is being validated.

    Methods:
        report_step(info: str, target: int, reset_counter: bool, plus_step: int) -> None:
            Report progress of the validation run.
    """
    def report_step(self, info: str = "", target: Optional[int] = None, reset_counter: bool = False, plus_step: int = 1) -> None:
        """
        Report progress messages from the validation run.

        Args:
            info (str): Progress message.
            target (Optional[int]): Total number of steps, if known.
            reset_counter (bool): Whether to restart the step counter.
            plus_step (int): Number of steps completed since the last report.
        """
        pass
