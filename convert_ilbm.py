import argparse
import logging
from pathlib import Path
from sys import argv

from PIL import Image

from iffilbm import ILBMError, decode_ilbm, parse_metadata
from iffilbm.render import make_preview, make_thumbnail

LOGGER_NAME = 'convert_ilbm'
IFF_SUFFIXES = ('.iff', '.ilbm', '.lbm')

log = logging.getLogger(LOGGER_NAME)


def setup_logger(verbose: bool) -> logging.Logger:
    logger = logging.getLogger()
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter('%(asctime)s | %(levelname)-8s | %(message)s', datefmt='%H:%M:%S'))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    return logger


def png_path(filename) -> Path:
    path = Path(filename)
    if path.suffix.lower() in IFF_SUFFIXES:
        return path.with_suffix('.png')
    return path.with_name(path.name + '.png')


def convert_ilbm(filename, y_scaling: int = 1, output=None, thumbnail=None, preview=False) -> Path:
    with open(filename, 'rb') as f:
        decoded = decode_ilbm(f.read())

    if thumbnail is not None:
        im = make_thumbnail(decoded, thumbnail)
    elif preview:
        im = make_preview(decoded)
    else:
        im = decoded.to_image()
        if y_scaling != 1:
            im = im.resize((decoded.width, decoded.height * y_scaling), Image.NEAREST)

    out = Path(output) if output is not None else png_path(filename)
    im.save(out, 'PNG')
    log.info('%s: %dx%d %s -> %s', filename, decoded.width, decoded.height, decoded.mode.value, out)
    return out


def print_info(filename):
    with open(filename, 'rb') as f:
        meta = parse_metadata(f.read())
    print(filename)
    for key, value in meta.attributes().items():
        print('  %s: %s' % (key, ', '.join(value) if isinstance(value, list) else value))


def parse_size(text: str):
    try:
        w, h = text.lower().split('x')
        size = int(w), int(h)
    except ValueError:
        raise argparse.ArgumentTypeError('expected WIDTHxHEIGHT, got %r' % text)
    if size[0] < 1 or size[1] < 1:
        raise argparse.ArgumentTypeError('thumbnail size must be positive')
    return size


def main(args=None) -> int:
    ap = argparse.ArgumentParser(prog='convert-ilbm', description='Convert IFF ILBM/PBM images to PNG')
    ap.add_argument('files', nargs='+', type=Path, metavar='FILE')
    ap.add_argument('-o', '--output', type=Path, help='output file (only with a single input)')
    ap.add_argument('-y', '--y-scaling', type=int, default=1, help='repeat every row N times')
    ap.add_argument('--thumbnail', type=parse_size, metavar='WxH', help='scale down to fit WxH')
    ap.add_argument('--preview', action='store_true', help='size for a preview panel (at most 1200x900, at least 200 per side)')
    ap.add_argument('--info', action='store_true', help='print metadata instead of converting')
    ap.add_argument('-v', '--verbose', action='store_true')
    args = ap.parse_args(args)

    if args.output is not None and len(args.files) > 1:
        ap.error('--output needs exactly one input file')
    if args.y_scaling < 1:
        ap.error('--y-scaling must be at least 1')
    if args.thumbnail is not None and args.preview:
        ap.error('--thumbnail and --preview cannot be combined')
    if args.y_scaling != 1 and (args.thumbnail is not None or args.preview):
        ap.error('--y-scaling cannot be combined with --thumbnail or --preview')

    setup_logger(args.verbose)

    status = 0
    for filename in args.files:
        try:
            if args.info:
                print_info(filename)
            else:
                convert_ilbm(filename, args.y_scaling, args.output, args.thumbnail, args.preview)
        except (ILBMError, OSError) as e:
            log.error('%s: %s', filename, e)
            status = 1
    return status


if __name__ == '__main__':
    raise SystemExit(main(argv[1:]))
