"""
Command line entry point for inspecting and toggling HapticsKit.
"""

import argparse
from typing import Dict, List, Optional

from rich.console import Console

from .backends import (
    HapticBackend,
    NullHapticBackend,
    UIKitHapticBackend,
    WatchKitHapticBackend,
    get_haptic_backend,
)
from .config import HapticsKitConfiguration, HapticsKitSettings
from .core import HapticsKit
from .exceptions import HapticBackendError, HapticsKitError
from .schemas import ImpactFeedbackStyle, NotificationFeedbackType, WatchHapticType
from .storage import standard_defaults
from .utils.logging import setup_logging
from .utils.platform import detect_platform

console = Console()

THEME: Dict[str, str] = {
    "success": "#00ff88",
    "error": "#f85149",
    "warning": "#d29922",
    "muted": "#7d8590",
    "text": "#e6edf3",
}

ICONS: Dict[str, str] = {
    "success": "✓",
    "error": "✗",
    "bullet": "•",
}


COMMAND_PRIMITIVES: Dict[str, str] = {
    "notify": "notification_occurred",
    "impact": "impact_occurred",
    "select": "selection_changed",
    "play": "play_haptic",
}


def _resolve_backend(name: str) -> HapticBackend:
    """
    Build the backend requested on the command line.

    Raises:
        HapticBackendError: An explicitly requested bridge cannot load
    """
    if name == "auto":
        return get_haptic_backend()
    if name == "null":
        return NullHapticBackend()

    if name == "uikit":
        backend: HapticBackend = UIKitHapticBackend(detect_platform())
    else:
        backend = WatchKitHapticBackend()

    if not backend.available:
        raise HapticBackendError(name, "Objective-C bridge could not be loaded")
    return backend


def _print_status(haptics: HapticsKit) -> None:
    platform = detect_platform()
    c_muted = THEME["muted"]
    c_text = THEME["text"]

    def flag(value: bool) -> str:
        color = THEME["success"] if value else THEME["error"]
        icon = ICONS["success"] if value else ICONS["error"]
        return f"[{color}]{icon} {'yes' if value else 'no'}[/]"

    platform_str = platform.family
    if platform.os_version:
        platform_str += f" {platform.os_version}"
    if platform.is_simulator:
        platform_str += " (simulator)"

    console.print(f"[{c_muted}]PLATFORM[/]   [{c_text}]{platform_str}[/]")
    console.print(f"[{c_muted}]BACKEND[/]    [{c_text}]{haptics.backend.name}[/]")
    console.print(
        f"[{c_muted}]KEY[/]        [{c_text}]{haptics.configuration.storage_key}[/]"
    )
    console.print(f"[{c_muted}]SUPPORTED[/]  {flag(haptics.supported)}")
    console.print(f"[{c_muted}]ENABLED[/]    {flag(haptics.haptic_feedback_enabled)}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hapticskit",
        description="Inspect haptic support and toggle the haptic feedback preference",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--storage-key",
        type=str,
        default=None,
        help="Preference key (default: HAPTICSKIT_STORAGE_KEY or HKHapticFeedbackEnabled)",
    )
    parser.add_argument(
        "--defaults-path",
        type=str,
        default=None,
        help="Use a JSON defaults file instead of the standard store",
    )
    parser.add_argument(
        "--backend",
        choices=["auto", "uikit", "watchkit", "null"],
        default="auto",
        help="Haptic backend to use",
    )

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("status", help="Show platform support and preference")
    commands.add_parser("enable", help="Turn haptic feedback on")
    commands.add_parser("disable", help="Turn haptic feedback off")

    notify = commands.add_parser("notify", help="Play a notification haptic")
    notify.add_argument(
        "type", choices=[member.value for member in NotificationFeedbackType]
    )

    impact = commands.add_parser("impact", help="Play an impact haptic")
    impact.add_argument(
        "--style",
        choices=[member.value for member in ImpactFeedbackStyle],
        default=ImpactFeedbackStyle.MEDIUM.value,
    )
    impact.add_argument("--intensity", type=float, default=1.0)

    commands.add_parser("select", help="Play a selection haptic")

    play = commands.add_parser("play", help="Play a watch haptic")
    play.add_argument("type", choices=[member.value for member in WatchHapticType])

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the CLI.

    Args:
        argv: Arguments, defaults to sys.argv[1:]

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)
    setup_logging(verbose=args.verbose)

    settings = HapticsKitSettings.from_env()
    configuration = HapticsKitConfiguration(
        store=standard_defaults(args.defaults_path),
        storage_key=args.storage_key or settings.storage_key,
    )

    try:
        haptics = HapticsKit(configuration, backend=_resolve_backend(args.backend))
    except HapticsKitError as e:
        console.print(f"[{THEME['error']}]{ICONS['error']} {e.message}[/]")
        return 1

    if args.command == "status":
        _print_status(haptics)
        return 0

    if args.command in ("enable", "disable"):
        haptics.haptic_feedback_enabled = args.command == "enable"
        state = "enabled" if haptics.haptic_feedback_enabled else "disabled"
        console.print(
            f"[{THEME['success']}]{ICONS['success']} Haptic feedback {state}[/]"
        )
        return 0

    if not haptics.should_perform_haptics:
        reason = "not supported" if not haptics.supported else "disabled"
        console.print(
            f"[{THEME['warning']}]{ICONS['bullet']} Haptic feedback {reason}; nothing played[/]"
        )
        return 0

    if not haptics.backend.provides(COMMAND_PRIMITIVES[args.command]):
        console.print(
            f"[{THEME['warning']}]{ICONS['bullet']} {args.command} is not available "
            f"on the {haptics.backend.name} backend; nothing played[/]"
        )
        return 0

    if args.command == "notify":
        haptics.perform_notification(args.type)
    elif args.command == "impact":
        haptics.perform_impact(args.style, args.intensity)
    elif args.command == "select":
        haptics.perform_selection()
    elif args.command == "play":
        haptics.perform(args.type)

    console.print(f"[{THEME['success']}]{ICONS['success']} Played {args.command}[/]")
    return 0


def cli() -> None:
    """Console script entry point."""
    raise SystemExit(main())


if __name__ == "__main__":
    cli()
