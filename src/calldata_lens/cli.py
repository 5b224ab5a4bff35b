#!/usr/bin/env python3
"""
Main entry point for calldata-lens.

This script:
1. Reads calldata (directly, from a signed raw transaction, or by tx hash)
2. Looks up candidate signatures for its selector on 4byte.directory
   (or picks the matching function from a contract ABI given with --abi)
3. Picks the most plausible one (or the one given with --signature)
4. Decodes the arguments and maps them onto the calldata bytes
5. Prints a Markdown report, optionally saving JSON results
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .clients import fetch_transaction_input
from .config import Settings
from .decoding.abi import load_abi
from .errors import CalldataLensError
from .extraction import parse_raw_transaction
from .reporting import format_decode_report, save_json_results
from .signatures import FourByteDirectory, SignatureHistory
from .workflow import CalldataDecoder

# Load environment variables
load_dotenv(override=True)

logger = logging.getLogger(__name__)


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Decode ABI-encoded calldata without an ABI and show which bytes belong to which argument',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment Variables (can also be set in .env file):
  FOURBYTE_API_URL        Signature directory API root
  SIGNATURE_CACHE_TTL     Seconds to cache directory lookups (default: 21600)
  REQUEST_TIMEOUT         HTTP timeout in seconds (default: 10)
  SIGNATURE_HISTORY_FILE  Where confirmed signatures are remembered
  RPC_URL                 JSON-RPC endpoint used with --tx-hash
  ABI_FILE                Contract ABI JSON to decode against

Priority: Command-line arguments > Environment variables > Defaults
        """
    )
    parser.add_argument('calldata', nargs='?', help='Calldata hex string (0x optional)')
    source = parser.add_mutually_exclusive_group()
    source.add_argument('--raw-tx', help='Signed raw transaction to take calldata from')
    source.add_argument('--tx-hash', help='Hash of a mined transaction to take calldata from')
    parser.add_argument(
        '--rpc-url',
        default=settings.rpc_url,
        help='JSON-RPC endpoint for --tx-hash (env: RPC_URL)'
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument('--signature', help='Decode with this text signature instead of resolving one')
    mode.add_argument(
        '--abi',
        type=Path,
        default=settings.abi_file,
        help='Path to contract ABI JSON file to decode against (env: ABI_FILE, optional)'
    )
    parser.add_argument(
        '--remember',
        action='store_true',
        help='Remember the resolved signature as the choice for this selector'
    )
    parser.add_argument(
        '--history-file',
        type=Path,
        default=settings.history_file,
        help='Signature history file (env: SIGNATURE_HISTORY_FILE)'
    )
    parser.add_argument('--json-output', type=Path, help='Also save the result as JSON to this path')
    parser.add_argument(
        '--debug',
        action='store_true',
        default=False,
        help='Enable debug mode to log to file (default: False)'
    )
    return parser


def configure_logging(debug: bool):
    if debug:
        output_dir = Path("output")
        output_dir.mkdir(exist_ok=True)
        logging.basicConfig(
            level=logging.INFO,
            format='%(asctime)s - %(levelname)s - %(message)s',
            handlers=[
                logging.FileHandler(output_dir / 'decode_calldata.log')
            ]
        )
    else:
        logging.basicConfig(
            level=logging.CRITICAL,
            format='%(asctime)s - %(levelname)s - %(message)s',
            handlers=[
                logging.NullHandler()
            ]
        )


def read_calldata(args: argparse.Namespace, parser: argparse.ArgumentParser, settings: Settings) -> str:
    if args.raw_tx:
        parsed = parse_raw_transaction(args.raw_tx)
        if not parsed:
            parser.error("--raw-tx could not be parsed as a signed transaction")
        return parsed['input']
    if args.tx_hash:
        return fetch_transaction_input(args.tx_hash, args.rpc_url, timeout=settings.request_timeout)
    if not args.calldata:
        parser.error("calldata is required (or use --raw-tx / --tx-hash)")
    return args.calldata


def main(argv: Optional[list] = None) -> int:
    """Main entry point."""
    settings = Settings.from_env()
    parser = build_parser(settings)
    args = parser.parse_args(argv)

    configure_logging(args.debug)

    decoder = CalldataDecoder(
        directory=FourByteDirectory(
            base_url=settings.fourbyte_api_url,
            cache_ttl=settings.signature_cache_ttl,
            timeout=settings.request_timeout,
        ),
        history=SignatureHistory(args.history_file),
    )
    # An explicit signature beats an ABI picked up from the environment
    use_abi = args.abi is not None and args.signature is None

    try:
        calldata = read_calldata(args, parser, settings)
        if use_abi:
            result = decoder.decode_with_abi(calldata, load_abi(args.abi))
        else:
            result = decoder.decode(calldata, signature=args.signature)
    except CalldataLensError as e:
        logger.error(f"Decoding failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.remember and result.function_signature and args.signature is None and not use_abi:
        decoder.confirm_selection(result.selector, result.function_signature)

    print(format_decode_report(result))

    if args.json_output:
        save_json_results(result, args.json_output)

    if not result.ok:
        logger.error(f"❌ {result.error}")
        return 1
    logger.info(f"✅ Decoded {result.selector} as {result.function_signature}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
