"""
位元運算命令列工具

"""
import argparse
import sys

from .config.config import BitmopConfig
from .config.constants import PROFILE_CONFIG
from .log_config.setup import setup_logging
from .core import (
    BitmopError, mask, mask_offset, mask_width, long_to_octets,
    to_hex, from_hex, hex_of_text, text_of_hex, format_word, to_unsigned64,
)


def _int_arg(text):
    """解析十進位或 0x 開頭的整數參數"""
    try:
        return int(text, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"無效的整數: {text}")


def build_parser() -> argparse.ArgumentParser:
    """建立參數解析器"""
    parser = argparse.ArgumentParser(prog='uuid-bitmop', description='UUID 位元運算工具')
    parser.add_argument('--profile', choices=sorted(PROFILE_CONFIG), default="default",
                        help='配置名稱')
    parser.add_argument('-v', '--verbose', action='store_true', help='輸出除錯日誌')

    sub = parser.add_subparsers(dest='cmd', required=True)

    p = sub.add_parser('mask', help='由寬度與偏移建立遮罩')
    p.add_argument('width', type=_int_arg)
    p.add_argument('offset', type=_int_arg)

    p = sub.add_parser('inspect', help='顯示遮罩的寬度與偏移')
    p.add_argument('mask', type=_int_arg)

    p = sub.add_parser('hex', help='整數轉十六進位字串')
    p.add_argument('value', type=_int_arg)
    p.add_argument('--pad', type=_int_arg, default=None, help='位元組長度')

    p = sub.add_parser('octets', help='整數轉位元組列表')
    p.add_argument('value', type=_int_arg)
    p.add_argument('--pad', type=_int_arg, default=None, help='位元組長度')

    p = sub.add_parser('unhex', help='十六進位字串轉整數')
    p.add_argument('hex')

    p = sub.add_parser('hex-text', help='文字轉十六進位字串')
    p.add_argument('text')

    p = sub.add_parser('unhex-text', help='十六進位字串轉文字')
    p.add_argument('hex')

    p = sub.add_parser('pphex', help='顯示字組的十六進位與二進位')
    p.add_argument('value', type=_int_arg)

    return parser


def run(args, config: BitmopConfig) -> str:
    """執行子命令，返回輸出文字"""
    pad = args.pad if getattr(args, 'pad', None) is not None else config.get_pad_count()

    if args.cmd == 'mask':
        m = mask(args.width, args.offset)
        return f"{m} 0x{to_unsigned64(m):016x}"
    if args.cmd == 'inspect':
        return f"width={mask_width(args.mask)} offset={mask_offset(args.mask)}"
    if args.cmd == 'hex':
        return to_hex(args.value, pad)
    if args.cmd == 'octets':
        return " ".join(str(b) for b in long_to_octets(args.value, pad))
    if args.cmd == 'unhex':
        return str(from_hex(args.hex))
    if args.cmd == 'hex-text':
        return hex_of_text(args.text)
    if args.cmd == 'unhex-text':
        return text_of_hex(args.hex)
    if args.cmd == 'pphex':
        return format_word(args.value)
    raise ValueError(f"未知命令: {args.cmd}")


def main(argv=None):
    """程式入口"""
    args = build_parser().parse_args(argv)
    config = BitmopConfig(args.profile)

    # 日誌實例
    level = 'DEBUG' if args.verbose else config.get_log_level()
    logger = setup_logging(log_dir=config.get_log_dir(), log_file=config.get_log_file(),
                           mode='cli', level=level)
    logger.debug(f"執行命令: {args.cmd} (profile={args.profile})")

    try:
        print(run(args, config))
    except (BitmopError, TypeError) as e:
        logger.error(f"執行失敗: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
