"""
Batch Processor Service - reads a triangle file and counts containment.

Ties together configuration, the file reader and the containment pipeline.
Owns the batch-level disposition: the pipeline reports per-record outcomes,
this service decides what to log and what to return.
"""

from typing import Optional

from triorigin.analytics.counter import BatchStats
from triorigin.logging import LogEvent, StructuredLogger, create_logger
from triorigin.pipeline import ContainmentPipeline, PipelineBuilder
from triorigin_processor.config import ProcessorConfig
from triorigin_processor.reader import read_records


class BatchProcessorService:
    """
    Runs one configured batch.

    Usage:
        config = ProcessorConfig.from_yaml("config.yaml")
        service = BatchProcessorService(config)
        stats = service.run()
    """

    def __init__(
        self,
        config: ProcessorConfig,
        logger: Optional[StructuredLogger] = None,
    ):
        self.config = config
        self.logger = logger or create_logger(
            "processor", level=config.logging.effective_level
        )

    def build_pipeline(self) -> ContainmentPipeline:
        batch = self.config.batch
        return (
            PipelineBuilder()
            .with_policy(batch.error_policy)
            .with_workers(batch.workers)
            .with_chunk_size(batch.chunk_size)
            .with_trace(self.config.logging.trace)
            .with_logger(self.logger)
            .build()
        )

    def run(self) -> BatchStats:
        """
        Read the input file and classify every record.

        Raises:
            ValueError / FileNotFoundError: input not configured or missing
            BatchAbortedError: a record failed under the abort policy
        """
        try:
            path = self.config.validate_input()
        except (ValueError, FileNotFoundError) as e:
            self.logger.error(
                event=LogEvent.INPUT_ERROR,
                message="Cannot read input",
                metadata={'input_path': str(self.config.input_path)},
                exc_info=e,
            )
            raise

        records = list(read_records(path))
        self.logger.info(
            event=LogEvent.INPUT_READ,
            message=f"Read {len(records)} records",
            metadata={'input_path': str(path), 'records': len(records)}
        )

        return self.build_pipeline().run(records)
