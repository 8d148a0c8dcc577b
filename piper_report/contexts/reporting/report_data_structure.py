"""
Report data structures.

ReferenceBundle carries references already resolved by the calling script.
ReportContext holds everything one template render needs and is discarded
after the report is written.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

from piper_report.contexts.versioning.constants import UNKNOWN

PathLike = Union[str, Path]


@dataclass(frozen=True)
class ReferenceBundle:
    """
    Reference resources resolved outside the resource map.

    Fields are rendered with str(), so paths and version strings both work.
    Fields left as None render as UNKNOWN.

    Attributes:
        dbsnp: dbSNP reference
        hapmap: HapMap reference
        omni: 1000G Omni reference
        phase1: 1000G phase 1 indels
        mills: Mills and 1000G gold standard indels
    """

    dbsnp: Optional[PathLike] = None
    hapmap: Optional[PathLike] = None
    omni: Optional[PathLike] = None
    phase1: Optional[PathLike] = None
    mills: Optional[PathLike] = None

    def resolved(self) -> Dict[str, str]:
        """Field name -> rendered value, UNKNOWN for missing references."""
        return {
            name: str(value) if value is not None else UNKNOWN
            for name, value in vars(self).items()
        }


@dataclass
class ReportContext:
    """
    Values substituted into one report template.

    Attributes:
        report_type: Report type the context was built for
        versions: Template variable -> resolved version string
        files: Template variable -> file name, path or bundle
    """

    report_type: str
    versions: Dict[str, str] = field(default_factory=dict)
    files: Dict[str, Any] = field(default_factory=dict)

    def template_vars(self) -> Dict[str, Any]:
        """Merge files and versions into the template namespace."""
        return {**self.files, **self.versions}
