from .core import GameRecord, run_case, run_batch, summarize
from .io import write_csv, write_manifest, run_provenance

__all__ = ["GameRecord", "run_case", "run_batch", "summarize", "write_csv", "write_manifest",
           "run_provenance"]
