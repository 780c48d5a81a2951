"""
Baseline storage for the semantic guard.

A baseline is a JSON document kept next to the data (and committed to the
repository) holding the summary statistics of the last accepted file:

    {
      "created_at": "<ISO-8601>",
      "baseline_stats": {"mean": ..., "median": ..., ...},
      "sample_data": [first values of the file]
    }
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pydantic import BaseModel, Field, ValidationError

from ..config import get_logger, settings
from ..statistics import StatisticalSummary
from ..utils import BaselineException
from ..utils.helpers import head, utc_timestamp

logger = get_logger(__name__)


class BaselineStats(BaseModel):
    """Schema for persisted summary statistics."""

    mean: float
    median: float
    std_dev: float
    variance: float
    min: float
    max: float
    p25: float
    p75: float
    count: int = Field(..., ge=1)


class BaselineDocument(BaseModel):
    """Schema for a baseline file."""

    created_at: str
    baseline_stats: BaselineStats
    sample_data: List[float] = Field(default_factory=list)


@dataclass
class BaselineRecord:
    """Baseline resolved for one run."""

    stats: StatisticalSummary
    path: Path
    sample_data: List[float] = field(default_factory=list)
    is_new: bool = False


class BaselineStore:
    """
    Loads baselines from, and bootstraps them into, a baseline directory.
    """
    
    def __init__(
        self,
        baseline_dir: Union[str, Path, None] = None,
        sample_size: Optional[int] = None
    ):
        """
        Initialize baseline store.
        
        Args:
            baseline_dir: Directory holding baseline files (default from settings)
            sample_size: Number of raw values kept as a sample (default from settings)
        """
        self.baseline_dir = Path(baseline_dir or settings.baseline_dir)
        self.sample_size = sample_size if sample_size is not None else settings.sample_size
    
    def path_for(self, file_name: str) -> Path:
        return self.baseline_dir / file_name
    
    def load(self, file_name: str) -> BaselineRecord:
        """
        Load an existing baseline.
        
        Args:
            file_name: Name of the data file the baseline belongs to
            
        Returns:
            BaselineRecord
            
        Raises:
            BaselineException: If the file is missing or not a valid baseline
        """
        path = self.path_for(file_name)
        
        try:
            with open(path, "r", encoding="utf-8") as f:
                document = BaselineDocument.model_validate(json.load(f))
        except (OSError, json.JSONDecodeError, ValidationError) as e:
            raise BaselineException(
                f"Failed to parse baseline file: {e}",
                details={"path": str(path)}
            )
        
        logger.info("baseline_loaded", path=str(path), created_at=document.created_at)
        
        return BaselineRecord(
            stats=StatisticalSummary.from_dict(document.baseline_stats.model_dump()),
            path=path,
            sample_data=document.sample_data,
            is_new=False
        )
    
    def save(
        self,
        file_name: str,
        stats: StatisticalSummary,
        values: Sequence[float]
    ) -> BaselineRecord:
        """
        Write a new baseline from the given summary.
        
        Args:
            file_name: Name of the data file the baseline belongs to
            stats: Summary to record
            values: Raw values; the first few are kept as a sample
            
        Returns:
            BaselineRecord flagged as new
        """
        path = self.path_for(file_name)
        sample = head(values, self.sample_size)
        document = BaselineDocument(
            created_at=utc_timestamp(),
            baseline_stats=BaselineStats(**stats.to_dict()),
            sample_data=sample
        )
        
        try:
            if not path.parent.exists():
                path.parent.mkdir(parents=True, exist_ok=True)
                logger.info("baseline_directory_created", directory=str(path.parent))
            
            with open(path, "w", encoding="utf-8") as f:
                json.dump(document.model_dump(), f, indent=2)
        except OSError as e:
            raise BaselineException(
                f"Failed to write baseline file: {e}",
                details={"path": str(path)}
            )
        
        logger.info("baseline_created", path=str(path), size_bytes=path.stat().st_size)
        
        return BaselineRecord(stats=stats, path=path, sample_data=sample, is_new=True)
    
    def load_or_create(
        self,
        file_name: str,
        current_stats: StatisticalSummary,
        current_values: Sequence[float]
    ) -> BaselineRecord:
        """
        Load the baseline for a file, bootstrapping it from the current data
        when it is missing or unreadable.
        
        Args:
            file_name: Name of the data file
            current_stats: Summary of the current data
            current_values: Current raw values
            
        Returns:
            BaselineRecord
        """
        path = self.path_for(file_name)
        
        if path.exists():
            try:
                return self.load(file_name)
            except BaselineException as e:
                logger.warning("baseline_unreadable", path=str(path), error=e.message)
        
        logger.warning(
            "baseline_missing_creating_from_current_data",
            path=str(path)
        )
        return self.save(file_name, current_stats, current_values)
