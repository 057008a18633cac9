#!/usr/bin/env python3
"""Encode payment records into HUB-3 barcode payloads.

Records come from JSON files (one object or a list of objects, using either
snake_case keys or the legacy form keys), are generated with --sample, or
are converted from invoices generated with --invoices. Each valid record's
payload is printed; invalid records print every violation message. The exit
status is 1 if any record or invoice was rejected.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from hub3_codec.codec import encode, transliterate
from hub3_codec.config import CodecConfig, Hub3Config
from hub3_codec.conversion import to_payment_record, validate_invoice
from hub3_codec.exceptions import PaymentValidationError
from hub3_codec.generators import InvoiceGenerator, PaymentRecordGenerator
from hub3_codec.logging import setup_logging
from hub3_codec.models import Invoice, PaymentRecord
from hub3_codec.serialization import invoice_to_dict, record_from_dict, record_to_dict

logger = logging.getLogger(__name__)


def load_records(path: Path) -> list[PaymentRecord]:
    """Read one record or a list of records from a JSON file."""
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = [data]
    return [record_from_dict(item) for item in data]


def records_from_invoices(invoices: list[Invoice]) -> tuple[list[PaymentRecord], int]:
    """Convert complete invoices to payment records, skipping the rest.

    Returns
    -------
    tuple[list[PaymentRecord], int]
        Converted records and the number of skipped invoices.
    """
    records = []
    skipped = 0
    for invoice in invoices:
        problems = validate_invoice(invoice)
        if problems:
            skipped += 1
            logger.warning("Invoice %s skipped: %s", invoice.invoice_number, "; ".join(problems))
            continue
        records.append(to_payment_record(invoice, purpose_code="SCVE"))
    return records, skipped


def write_json(path: Path, data: list[dict]) -> None:
    """Write a list of dicts as pretty-printed JSON."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
    logger.info("Wrote %d entries to %s", len(data), path)


def encode_records(
    records: list[PaymentRecord],
    config: CodecConfig,
    ascii_only: bool = False,
) -> int:
    """Print the payload or the violations for each record.

    Returns
    -------
    int
        Number of rejected records.
    """
    rejected = 0
    for index, record in enumerate(records, start=1):
        try:
            payload = encode(record, config)
        except PaymentValidationError as e:
            rejected += 1
            logger.warning("Record %d rejected: %s", index, ", ".join(e.outcome.tags))
            print(f"# record {index}: invalid", file=sys.stderr)
            for message in e.outcome.messages():
                print(f"- {message}", file=sys.stderr)
            continue

        if ascii_only:
            payload = transliterate(payload)
        print(f"# record {index}")
        sys.stdout.write(payload)
    return rejected


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Encode payment records into HUB-3 payloads")
    parser.add_argument(
        "files",
        nargs="*",
        type=Path,
        help="JSON files holding payment records",
    )
    parser.add_argument(
        "--sample",
        type=int,
        default=0,
        help="Number of generated sample records to encode (default: 0)",
    )
    parser.add_argument(
        "--invoices",
        type=int,
        default=0,
        help="Number of generated invoices to convert and encode (default: 0)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for sample generation",
    )
    parser.add_argument(
        "--ascii",
        action="store_true",
        help="Replace Croatian diacritics in the output for ASCII-only renderers",
    )
    parser.add_argument(
        "--no-purpose-check",
        action="store_true",
        help="Accept unknown purpose codes",
    )
    parser.add_argument(
        "--strict-reference",
        action="store_true",
        help="Check the reference number shape (digit groups joined by hyphens)",
    )
    parser.add_argument(
        "--dump",
        type=Path,
        default=None,
        help="Write the records as JSON to this file",
    )
    parser.add_argument(
        "--dump-invoices",
        type=Path,
        default=None,
        help="Write the generated invoices as JSON to this file",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Log level (default: LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--log-format",
        choices=["standard", "json"],
        default=None,
        help="Log format (default: LOG_FORMAT or standard)",
    )
    args = parser.parse_args()

    config = Hub3Config.from_env()
    setup_logging(
        level=args.log_level or config.log_level,
        format_type=args.log_format or config.log_format,
        stream=sys.stderr,
    )

    codec_config = CodecConfig(
        currency=config.codec.currency,
        model_prefix=config.codec.model_prefix,
        validate_purpose_code=config.codec.validate_purpose_code and not args.no_purpose_check,
        enforce_reference_policy=config.codec.enforce_reference_policy or args.strict_reference,
    )

    seed = args.seed if args.seed is not None else config.seed

    records: list[PaymentRecord] = []
    for path in args.files:
        loaded = load_records(path)
        logger.info("Loaded %d records from %s", len(loaded), path)
        records.extend(loaded)

    if args.sample:
        generator = PaymentRecordGenerator(seed=seed)
        records.extend(generator.generate_batch(args.sample))
        logger.info("Generated %d sample records", args.sample)

    skipped = 0
    if args.invoices:
        invoices = list(InvoiceGenerator(seed=seed).generate_batch(args.invoices))
        converted, skipped = records_from_invoices(invoices)
        records.extend(converted)
        logger.info("Converted %d of %d invoices", len(converted), len(invoices))
        if args.dump_invoices:
            write_json(args.dump_invoices, [invoice_to_dict(invoice) for invoice in invoices])

    if not records:
        parser.error("no records given: pass JSON files, --sample N or --invoices N")

    if args.dump:
        write_json(args.dump, [record_to_dict(record) for record in records])

    rejected = encode_records(records, codec_config, ascii_only=args.ascii)
    logger.info("Encoded %d of %d records", len(records) - rejected, len(records))
    sys.exit(1 if rejected or skipped else 0)


if __name__ == "__main__":
    main()
