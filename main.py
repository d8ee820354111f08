#!/usr/bin/env python
"""
Fireworks CLI - Rockets, explosions and fading trails

Usage:
    python main.py [options]

Examples:
    python main.py                              # Live window, classic preset
    python main.py --preset finale              # Busier show
    python main.py --record 600 -o show.gif     # Headless 10 second GIF
    python main.py --list-presets               # Show all presets
"""

import argparse
import sys
from pathlib import Path

import yaml


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Real-time fireworks particle simulation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Live Window Controls:
  click     - Launch a rocket at the pointer
  A         - Toggle automatic launches
  B         - Burst of staggered rockets
  C         - Clear all rockets
  SPACE     - Pause/resume
  I / H     - Toggle info / help
  S         - Save current frame as PNG
  ESC / Q   - Quit

Examples:
  %(prog)s                                   # Live window
  %(prog)s --preset calm --seed 7            # Reproducible calm show
  %(prog)s --record 300 -o show.gif          # Record 300 frames to GIF
  %(prog)s --record 120 --format frames -o out/
  %(prog)s --config myshow.yaml              # Settings from YAML
  %(prog)s --preset-info finale              # Show preset details
        """
    )

    parser.add_argument(
        '-p', '--preset',
        type=str,
        default='classic',
        help='Show preset (default: classic)'
    )

    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='YAML file with show settings (overrides --preset)'
    )

    parser.add_argument(
        '--seed',
        type=int,
        default=None,
        help='Random seed for a reproducible show'
    )

    parser.add_argument(
        '--width',
        type=int,
        default=None,
        help='Canvas width in pixels'
    )

    parser.add_argument(
        '--height',
        type=int,
        default=None,
        help='Canvas height in pixels'
    )

    parser.add_argument(
        '--interval',
        type=int,
        default=None,
        help='Ticks between automatic launches'
    )

    parser.add_argument(
        '--no-auto',
        action='store_true',
        help='Start with automatic launches off'
    )

    parser.add_argument(
        '-r', '--record',
        type=int,
        default=None,
        metavar='FRAMES',
        help='Record FRAMES ticks headless instead of opening a window'
    )

    parser.add_argument(
        '-o', '--output',
        type=str,
        default=None,
        help='Output path for --record (default: fireworks.gif)'
    )

    parser.add_argument(
        '-f', '--format',
        type=str,
        default='gif',
        choices=['gif', 'frames'],
        help='Output format for --record (default: gif)'
    )

    parser.add_argument(
        '--every',
        type=int,
        default=1,
        help='Keep one recorded frame every N ticks (default: 1)'
    )

    parser.add_argument(
        '--burst',
        action='store_true',
        help='Queue a burst on the first frame'
    )

    parser.add_argument(
        '--list-presets',
        action='store_true',
        help='List all available presets'
    )

    parser.add_argument(
        '--preset-info',
        type=str,
        metavar='NAME',
        help='Show details of a preset'
    )

    return parser


def resolve_config(args):
    """Build a ShowConfig from --config/--preset plus command line overrides"""
    from fireworks.core import get_preset, load_config

    if args.config:
        config = load_config(args.config)
    else:
        config = get_preset(args.preset)
        if config is None:
            raise ValueError(f"Preset '{args.preset}' not found")

    overrides = {
        'seed': args.seed,
        'width': args.width,
        'height': args.height,
        'launch_interval': args.interval,
    }
    if args.no_auto:
        overrides['auto_launch'] = False

    return config.with_overrides(**overrides)


def print_presets() -> None:
    from fireworks.core import get_preset_manager

    manager = get_preset_manager()
    print("Available Show Presets:\n")
    for name in manager.list_all():
        preset = manager.get(name)
        source = "" if manager.is_builtin(name) else " (user)"
        print(f"  {name:<12} - {preset.description}{source}")
    print(f"\nTotal: {len(manager.list_all())} presets")
    print("\nUsage: --preset <name>")
    print("Details: --preset-info <name>")


def print_preset_info(name: str) -> int:
    from fireworks.core import get_preset

    preset = get_preset(name)
    if preset is None:
        print(f"Error: Preset '{name}' not found")
        print("Use --list-presets to see available presets")
        return 1

    print(f"Preset: {preset.name}")
    print(f"Description: {preset.description}")
    print(f"\nSettings:")
    print(f"  Canvas: {preset.width}x{preset.height}")
    print(f"  Launch interval: {preset.launch_interval} ticks")
    print(f"  Auto launch: {'on' if preset.auto_launch else 'off'}")
    print(f"  Burst size: {preset.burst_min}-{preset.burst_max}, every {preset.burst_stagger} ticks")
    if preset.tags:
        print(f"\nTags: {', '.join(preset.tags)}")
    return 0


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list_presets:
        print_presets()
        return 0

    if args.preset_info:
        return print_preset_info(args.preset_info)

    from fireworks.core import (
        FireworksShow, ShowExporter, record_show,
        run_window, check_pygame_available,
    )

    try:
        config = resolve_config(args)
    except (OSError, ValueError, TypeError, yaml.YAMLError) as e:
        print(f"Error: {e}")
        return 1

    show = FireworksShow(config)
    if args.burst:
        show.burst()

    if args.record is not None:
        output = args.output or ('fireworks.gif' if args.format == 'gif' else 'fireworks_frames')
        try:
            images = record_show(show, args.record, every=args.every)
            result = ShowExporter.export(
                images, output, format=args.format, fps=max(1, config.fps // args.every)
            )
        except (OSError, ValueError) as e:
            print(f"Error: {e}")
            return 1

        if isinstance(result, list):
            print(f"Saved {len(result)} frames to {Path(output)}")
        else:
            print(f"Saved {len(images)} frames to {result}")
        print(f"Rockets launched: {show.launched_count}")
        return 0

    if not check_pygame_available():
        print("Error: The live window requires pygame. Install with: pip install pygame")
        print("Alternatively, record a GIF with --record FRAMES.")
        return 1

    print(f"Starting '{config.name}' show ({config.width}x{config.height} @ {config.fps} fps)")
    run_window(show)
    return 0


if __name__ == '__main__':
    sys.exit(main())
