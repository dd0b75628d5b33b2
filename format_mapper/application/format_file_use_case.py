from __future__ import annotations

import traceback
from typing import TYPE_CHECKING

from ..domain.exceptions import FormatMapperError
from ..infrastructure.io.exceptions import FormatMapperInfrastructureError
from ..registry import get_default_registry
from ..transformations import (
    BinTransformer,
    LookupTransformer,
    ParseTransformer,
    RenderTransformer,
    TransformationContext,
    TransformationPipeline,
)
from .models import FormatFileResponse

if TYPE_CHECKING:
    from pathlib import Path

    import pandas as pd

    from ..registry import FormatRegistry
    from .models import FormatFileRequest
    from .ports.services import LoggerPort, TableReaderPort

VERBOSE_TRACEBACK_LEVEL = 2


class FormatFileUseCase:
    """Read a file, apply formats column by column and optionally write it back."""

    def __init__(
        self,
        logger: LoggerPort,
        reader: TableReaderPort,
        registry: FormatRegistry | None = None,
    ) -> None:
        self.logger = logger
        self._reader = reader
        self._registry = registry

    @property
    def registry(self) -> FormatRegistry:
        return self._registry if self._registry is not None else get_default_registry()

    def execute(self, request: FormatFileRequest) -> FormatFileResponse:
        response = FormatFileResponse(input_path=request.input_path)
        try:
            frame = self._reader.read(request.input_path)
            self.logger.log_file_loaded(
                request.input_path.name,
                row_count=len(frame),
                column_count=len(frame.columns),
            )
            pipeline = self.build_pipeline(request)
            if not request.column_count:
                self.logger.warning(
                    f"{request.input_path.name}: no columns selected, data is unchanged"
                )
            result = pipeline.execute(
                frame,
                TransformationContext(
                    dataset=request.input_path.stem,
                    source_file=str(request.input_path),
                ),
            )
            for warning in result.warnings:
                self.logger.warning(warning)
            for error in result.errors:
                self.logger.error(error)
            applied = result.metadata.get("applied_transformers", [])
            response.applied_transformers = [
                step["name"] for step in applied if isinstance(step, dict)
            ]
            response.warnings = list(result.warnings)
            response.errors = list(result.errors)
            response.dataframe = result.data
            response.records = len(result.data)
            response.success = not result.errors
            if request.output_path is not None and response.success:
                self._write(result.data, request.output_path)
                response.output_path = request.output_path
                self.logger.success(
                    f"Wrote {len(result.data):,} rows to {request.output_path}"
                )
        except (FormatMapperError, FormatMapperInfrastructureError, OSError) as exc:
            response.success = False
            response.error = str(exc)
            self.logger.error(f"{request.input_path.name}: {exc}")
            if request.verbose >= VERBOSE_TRACEBACK_LEVEL:
                self.logger.error(traceback.format_exc())
        return response

    def build_pipeline(self, request: FormatFileRequest) -> TransformationPipeline:
        """Resolve every requested format name and chain the transformers.

        Raises ``UnknownFormatError`` before any data is touched when a
        name is neither in the catalog nor in the registry.
        """
        pipeline = TransformationPipeline(fail_safe=request.fail_safe)
        if request.parses:
            pipeline.add_transformer(
                ParseTransformer(
                    {col: self.registry.get(name) for col, name in request.parses.items()},
                    logger=self.logger,
                )
            )
        if request.lookups:
            pipeline.add_transformer(
                LookupTransformer(
                    {
                        col: request.catalog.get_lookup(name)
                        for col, name in request.lookups.items()
                    },
                    logger=self.logger,
                )
            )
        if request.bins:
            pipeline.add_transformer(
                BinTransformer(
                    {col: request.catalog.get_bin(name) for col, name in request.bins.items()},
                    logger=self.logger,
                )
            )
        if request.renders:
            pipeline.add_transformer(
                RenderTransformer(
                    {col: self.registry.get(name) for col, name in request.renders.items()},
                    output_suffix=request.render_suffix,
                    logger=self.logger,
                )
            )
        return pipeline

    def _write(self, frame: pd.DataFrame, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        frame.to_csv(path, index=False)
