import argparse
import logging
import sys
from dataclasses import replace

from .app import App
from .config import FPS, PRESETS, SAVE_FILE, get_preset
from .storage import BestScoreStore


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="face-flappy", description="Flap through the pipes, optionally with your own face.")
    parser.add_argument("--variant", choices=sorted(PRESETS), default="classic",
                        help="classic returns to the start screen after a crash, face restarts straight into play.")
    parser.add_argument("--fps", type=int, default=FPS)
    parser.add_argument("--best-file", default=SAVE_FILE, help="JSON file holding the best score.")
    parser.add_argument("--face-image", help="Image file to use as the bird's face.")
    parser.add_argument("--webcam", action="store_true", help="Use periodic webcam snapshots as the bird's face.")
    parser.add_argument("--webcam-index", type=int, default=0)
    parser.add_argument("--floor-margin", type=float, help="Override the floor boundary offset.")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def build_config(args):
    config = get_preset(args.variant)
    if args.floor_margin is not None:
        config = replace(config, floor_margin=args.floor_margin)
    return config


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(message)s"
    )

    app = App(build_config(args), store=BestScoreStore(args.best_file), fps=args.fps)
    app.open_window()
    if args.face_image:
        app.use_face_image(args.face_image)
    if args.webcam:
        app.use_webcam(args.webcam_index)
    app.run()
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(0)
