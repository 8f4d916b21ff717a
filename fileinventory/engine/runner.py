"""
Main inventory controller - orchestrates all components
"""
import logging
from datetime import datetime

from fileinventory.accessors.local_file_accessor import LocalFileAccessor
from fileinventory.analysis.file_classifier import FileClassifier
from fileinventory.analysis.link_inspector import LinkInspector
from fileinventory.config.configuration import InventoryConfiguration
from fileinventory.discovery.tree import TreeWalker
from fileinventory.engine.dedup import deduplicate
from fileinventory.engine.file_pipeline import FilePipeline
from fileinventory.output.csv_exporter import CsvExporter
from fileinventory.utils.logger import log_run_completion

logger = logging.getLogger('fileinventory')


class InventoryRunner:
    """Scan, deduplicate and export one directory tree"""

    def __init__(self, cfg: InventoryConfiguration):
        self.cfg = cfg
        self.start_time = None

        self.classifier = FileClassifier(
            cfg=cfg,
            file_accessor=LocalFileAccessor(),
            link_inspector=LinkInspector(timeout=cfg.scanning.link_timeout),
        )
        self.file_pipeline = FilePipeline(
            cfg=cfg,
            tree_walker=TreeWalker(),
            classifier=self.classifier,
        )
        self.exporter = CsvExporter(cfg.output.output_file)

    def execute(self) -> int:
        self.start_time = datetime.now()
        self.classifier.now = self.start_time
        logger.info(f"Starting inventory at {self.start_time:%Y-%m-%d %H:%M:%S}")

        # fail on an unwritable destination before scanning
        self.exporter.check_writable()

        result = self.file_pipeline.run(self.cfg.targets.directory_path)

        unique = deduplicate(result.records)
        duplicates = len(result.records) - len(unique)

        written = self.exporter.write(unique)

        self._print_summary(result, unique, duplicates)
        log_run_completion(self.start_time, self.exporter.output_path)
        return written

    def _print_summary(self, result, unique, duplicates):
        logger.info(f"Files found:        {result.files_found}")
        logger.info(f"Files with errors:  {result.errors}")
        logger.info(f"Duplicates removed: {duplicates}")
        logger.info(f"Active files:       {sum(r.active for r in unique)}")
        logger.info(f"Unwanted files:     {sum(r.unwanted for r in unique)}")
        logger.info(f"Linked workbooks:   {sum(r.contains_links for r in unique)}")
