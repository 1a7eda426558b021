import logging
import traceback


def log_exception(exc: BaseException, context: str = "") -> str:
    """
    Log the full traceback and return the first line for on-screen display.
    """
    full_traceback = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    first_line = traceback.format_exception_only(type(exc), exc)[-1].strip()

    # Log full traceback silently
    logging.error(f"{context}\n{full_traceback}" if context else full_traceback)

    return first_line
