import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import List

from fileinventory.analysis.file_classifier import FileClassifier
from fileinventory.analysis.file_record import FileRecord
from fileinventory.discovery.tree import TreeWalker
from fileinventory.engine.result_sink import RecordSink
from fileinventory.errors import PerFileProcessingError

logger = logging.getLogger("fileinventory")


@dataclass
class PipelineResult:
    records: List[FileRecord] = field(default_factory=list)
    files_found: int = 0
    errors: int = 0


class FilePipeline:
    def __init__(
            self,
            cfg,
            tree_walker: TreeWalker,
            classifier: FileClassifier,
    ):
        self.cfg = cfg
        self.concurrency = cfg.advanced.concurrency

        self.tree_walker = tree_walker
        self.classifier = classifier

    def _process(self, path: str, sink: RecordSink):
        sink.add(self.classifier.classify(path))

    def run(self, root: str) -> PipelineResult:
        # fails fast on a missing root
        paths = self.tree_walker.walk_tree(root)

        logger.info(
            f"Starting file scan on {root} with {self.concurrency} workers"
        )

        sink = RecordSink()
        result = PipelineResult()

        executor = ThreadPoolExecutor(
            max_workers=self.concurrency,
            thread_name_prefix="scan",
        )
        try:
            future_to_path = {
                executor.submit(self._process, path, sink): path
                for path in paths
            }
            result.files_found = len(future_to_path)

            for future in as_completed(future_to_path):
                path = future_to_path[future]
                try:
                    future.result()
                except PerFileProcessingError as e:
                    result.errors += 1
                    logger.warning(f"Skipping {path}: {e.cause}")
                except Exception as e:
                    result.errors += 1
                    logger.warning(f"Error scanning {path}: {e}")

        except KeyboardInterrupt:
            logger.warning("Interrupted by user, cancelling pending files")
            executor.shutdown(wait=False, cancel_futures=True)
            raise
        finally:
            executor.shutdown(wait=True)

        result.records = sink.snapshot()

        if not result.files_found:
            logger.warning("No files found")

        logger.info(
            f"Scan completed: {len(result.records)} of "
            f"{result.files_found} files processed"
        )
        return result
