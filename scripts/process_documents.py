#!/usr/bin/env python3
"""
Analyze every course document in a directory
Usage: python scripts/process_documents.py --input-dir data/input --output-dir data/output
"""

import click
from pathlib import Path
import json
from datetime import datetime
import logging
import sys

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.api.taxonomy_client import SkillLibraryClient
from src.core.course_analyzer import CourseAnalyzer
from src.core.skill_matcher import SkillMatcher
from src.core.taxonomy import TaxonomyProvider
from src.processors.batch_processor import BatchProcessor, find_documents
from config.logging_config import setup_logging
from config.settings import settings

logger = logging.getLogger(__name__)

@click.command()
@click.option('--input-dir', default=str(settings.INPUT_DIR), help='Input directory with course documents')
@click.option('--output-dir', default=str(settings.OUTPUT_DIR), help='Output directory for JSON')
@click.option('--min-confidence', type=float, default=None, help='Minimum skill confidence (0-100)')
@click.option('--taxonomy-file', type=click.Path(exists=True, dir_okay=False), default=None,
              help='CSV or JSON skill library file to merge into the taxonomy')
@click.option('--no-fuzzy', is_flag=True, help='Disable approximate matching of misspelled terms')
@click.option('--log-level', default='INFO', help='Logging level')
def main(input_dir: str,
         output_dir: str,
         min_confidence: float,
         taxonomy_file: str,
         no_fuzzy: bool,
         log_level: str):
    """Analyze all course documents in the input directory"""
    setup_logging(log_level)

    start_time = datetime.now()
    logger.info(f"Starting document analysis at {start_time}")

    output_path = Path(output_dir)
    output_path.mkdir(exist_ok=True, parents=True)

    documents = find_documents(Path(input_dir))
    logger.info(f"Found {len(documents)} course documents")

    if not documents:
        logger.error("No course documents found!")
        raise SystemExit(1)

    provider = TaxonomyProvider(
        client=SkillLibraryClient.from_settings(),
        taxonomy_file=Path(taxonomy_file) if taxonomy_file else None,
    )
    matcher = SkillMatcher(
        min_confidence=min_confidence,
        fuzzy_matching=False if no_fuzzy else None,
    )
    processor = BatchProcessor(CourseAnalyzer(taxonomy_provider=provider, matcher=matcher))

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    output_file = output_path / f"analysis_{timestamp}.json"
    metrics = processor.process_to_file(documents, output_file)

    summary_file = output_path / f"processing_summary_{timestamp}.json"
    with open(summary_file, 'w', encoding='utf-8') as f:
        json.dump({**metrics, "timestamp": timestamp}, f, indent=2)

    click.echo(f"Analyzed {metrics['processed']}/{metrics['total_files']} documents -> {output_file}")
    logger.info("Processing complete!")

if __name__ == "__main__":
    main()
