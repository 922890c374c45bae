# src/photo_tagger/demo.py
import argparse
import json
import logging
import sys


def main(argv=None):
    """CLI demo: upload a photo to Imagga, show progress, then print its tags and colors."""
    from .tagging import ImagePayload, ImaggaConfig, start_upload

    parser = argparse.ArgumentParser(
        prog="photo-tagger",
        description="Upload a photo to Imagga and print its tags and dominant colors.",
    )
    parser.add_argument("image", help="Path to the image file (e.g. cat.jpg)")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        payload = ImagePayload.from_path(args.image)
        config = ImaggaConfig.from_env()
    except (OSError, RuntimeError) as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        sys.exit(1)

    def on_progress(fraction):
        print(f"⏫ Uploading… {fraction:6.1%}", file=sys.stderr)

    result = start_upload(payload, on_progress, config=config)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
        return

    print("\n🏷  Tags:")
    for tag in result.tags:
        print(f"  - {tag}")
    if not result.tags:
        print("  (none)")

    print("\n🎨 Colors:")
    for color in result.colors:
        print(f"  - {color.color_name:<20} {color.rgb}  {color.hex}")
    if not result.colors:
        print("  (none)")


if __name__ == "__main__":
    main()
