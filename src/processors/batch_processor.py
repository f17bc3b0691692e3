from typing import List, Dict, Generator
import gc
import psutil
from pathlib import Path
import json
from tqdm import tqdm
import logging
from datetime import datetime

from src.core.course_analyzer import CourseAnalyzer
from src.core.errors import AnalysisError
from config.settings import settings

logger = logging.getLogger(__name__)


def find_documents(input_dir: Path, formats: List[str] = None) -> List[Path]:
    """All supported documents under ``input_dir``, in a stable order"""
    formats = formats or settings.SUPPORTED_FORMATS
    files = []
    for ext in formats:
        files.extend(Path(input_dir).glob(f'**/*.{ext}'))
    return sorted(set(files))


class BatchProcessor:
    """Analyzes a set of course documents one after another"""

    def __init__(self, analyzer: CourseAnalyzer = None, max_memory_percent: int = None):
        self.analyzer = analyzer or CourseAnalyzer()
        self.max_memory_percent = max_memory_percent or settings.MAX_MEMORY_PERCENT

    def _process_single(self, file_path: Path) -> Dict:
        """Analyze one document, turning rejections into an error record"""
        try:
            result = self.analyzer.analyze_file(file_path).to_dict()
            result["source"] = str(file_path)
            return result
        except AnalysisError as e:
            logger.error(f"Error processing {file_path}: {e}")
            return {
                "source": str(file_path),
                "error": e.message,
                "type": type(e).__name__,
            }
        except Exception as e:
            logger.exception(f"Unexpected error processing {file_path}: {e}")
            return {
                "source": str(file_path),
                "error": str(e) or "Unexpected error while analyzing the document",
                "type": type(e).__name__,
            }

    def check_memory(self):
        """Collect garbage when memory usage runs high between documents"""
        memory_percent = psutil.virtual_memory().percent

        if memory_percent > self.max_memory_percent:
            logger.warning(f"High memory usage: {memory_percent}%")
            gc.collect()

    def process_batch_generator(self, file_paths: List[Path]) -> Generator[Dict, None, None]:
        for file_path in tqdm(file_paths, desc="Analyzing documents"):
            yield self._process_single(Path(file_path))
            self.check_memory()

    def process_to_file(self, file_paths: List[Path], output_file: Path) -> Dict:
        """Process files and save results to JSON file"""
        start_time = datetime.now()
        total_files = len(file_paths)
        processed = 0
        failed = 0

        output_file = Path(output_file)
        output_file.parent.mkdir(parents=True, exist_ok=True)
        if not output_file.suffix:
            output_file = output_file.with_suffix('.json')

        try:
            with open(output_file, 'w', encoding='utf-8') as f:
                f.write('[\n')  # Start JSON array
                first = True

                for result in self.process_batch_generator(file_paths):
                    # Write to file immediately to save memory
                    if not first:
                        f.write(',\n')
                    json.dump(result, f, indent=2)
                    first = False
                    if "error" in result:
                        failed += 1
                    else:
                        processed += 1

                f.write('\n]')  # End JSON array
        except OSError as e:
            logger.error(f"Error writing to output file {output_file}: {e}")
            raise

        duration = (datetime.now() - start_time).total_seconds()
        metrics = {
            "total_files": total_files,
            "processed": processed,
            "failed": failed,
            "success_rate": processed / total_files * 100 if total_files > 0 else 0,
            "processing_time": duration,
            "output_file": str(output_file)
        }

        logger.info(f"Processing complete: {metrics}")
        return metrics
