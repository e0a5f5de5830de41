import argparse
import os
import signal
import sys

_logger_module = None
_translation_module = None


def _get_logger_funcs():
    """Lazy load logger functions."""
    global _logger_module
    if _logger_module is None:
        from .utils import logger as _logger_module
    return _logger_module


def _get_translation():
    """Lazy load translation function."""
    global _translation_module
    if _translation_module is None:
        from .utils import translation_utils as _translation_module
    return _translation_module._


def setup_signal_handlers():
    """Exit cleanly on SIGTERM so buffered output is still flushed."""
    _ = _get_translation()

    def signal_handler(sig, frame):
        sys.exit(128 + sig)

    try:
        signal.signal(signal.SIGTERM, signal_handler)
    except (OSError, ValueError) as e:
        _get_logger_funcs().get_logger("hilite.main").warning(
            _("Could not set up signal handlers: {}").format(e)
        )


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    from .settings.config import APP_NAME, APP_VERSION, ColorChoice

    _ = _get_translation()

    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description=_(
            "Read lines from standard input and color every match of the given patterns"
        ),
    )
    parser.add_argument(
        "patterns",
        nargs="*",
        metavar="PATTERN",
        help=_("Patterns to search for in the input"),
    )
    parser.add_argument(
        "--whole-line", "-l", action="store_true", help=_("Color the whole line")
    )
    parser.add_argument(
        "--case-sensitive", "-c", action="store_true", help=_("Case-sensitive search")
    )
    parser.add_argument(
        "--background", "-b", action="store_true", help=_("Color the background")
    )
    parser.add_argument(
        "--color",
        choices=[choice.value for choice in ColorChoice],
        default=ColorChoice.AUTO.value,
        help=_("When to emit color codes (default: auto)"),
    )
    parser.add_argument(
        "--version", "-v", action="version", version=f"{APP_NAME} {APP_VERSION}"
    )
    parser.add_argument(
        "--debug", "-d", action="store_true", help=_("Enable debug mode")
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help=_("Set logging level"),
    )
    parser.add_argument(
        "--log-file", metavar="PATH", help=_("Also write diagnostics to PATH")
    )
    return parser


def _silence_stdout():
    """
    Point stdout at /dev/null after it failed, so the interpreter's final
    flush does not report the same broken pipe a second time.
    """
    try:
        devnull = os.open(os.devnull, os.O_WRONLY)
        try:
            os.dup2(devnull, sys.stdout.fileno())
        finally:
            os.close(devnull)
    except (OSError, ValueError):
        pass


def main(argv=None) -> int:
    """Main entry point for the application."""
    logger_mod = _get_logger_funcs()
    _ = _get_translation()

    args = build_parser().parse_args(argv)

    if args.debug:
        logger_mod.enable_debug_mode()
    elif args.log_level:
        logger_mod.set_console_log_level(args.log_level)

    logger = logger_mod.get_logger("hilite.main")

    if args.log_file:
        from pathlib import Path

        try:
            logger_mod.set_log_file(Path(args.log_file).expanduser())
        except OSError as e:
            logger.error(_("Cannot open log file '{}': {}").format(args.log_file, e))
            return 1

    try:
        import setproctitle

        setproctitle.setproctitle("hilite")
        logger.debug("Process title set to 'hilite'.")
    except Exception as e:
        logger.debug(f"Failed to set process title: {e}")

    from .colors import PALETTE
    from .highlighter.rules import compile_patterns
    from .settings.config import ColorChoice, ColorizeOptions, resolve_color_choice
    from .terminal.sink import AnsiColorSink
    from .terminal.stream import process_input
    from .utils.exceptions import PatternCompileError

    options = ColorizeOptions(
        whole_line=args.whole_line,
        case_sensitive=args.case_sensitive,
        background=args.background,
    )

    try:
        patterns = compile_patterns(args.patterns, options.case_sensitive)
    except PatternCompileError:
        # Already reported by compile_patterns
        return 1

    is_tty = sys.stdout.isatty()
    use_color = resolve_color_choice(ColorChoice(args.color), is_tty)
    logger.debug(
        f"{len(patterns)} patterns, palette of {len(PALETTE)} colors, "
        f"color output {'on' if use_color else 'off'}"
    )

    setup_signal_handlers()

    sink = AnsiColorSink(sys.stdout.buffer, use_color=use_color, flush_lines=is_tty)
    try:
        stats = process_input(sys.stdin.buffer, patterns, options, sink)
    except KeyboardInterrupt:
        logger.info("Interrupted by user.")
        return 130

    if stats.write_errors:
        _silence_stdout()
    return 0


if __name__ == "__main__":
    sys.exit(main())
