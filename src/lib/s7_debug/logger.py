"""Logger structuré pour le debug."""

import json
from dataclasses import dataclass, asdict
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional, Any

from src.config import PATHS
from src.lib.s4_solver.types import SolverReport


@dataclass
class SolveLog:
    """Log d'une résolution."""
    timestamp: str
    width: int
    height: int
    status: str
    rounds: int
    safe_count: int
    flag_count: int
    failed_index: Optional[int]
    duration: float
    metadata: Dict[str, Any]


class DebugLogger:
    """Logger structuré pour le debug."""

    def __init__(self, log_dir: str = PATHS['logs']):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.session_id = datetime.now().strftime("%Y%m%d_%H%M%S")
        self.solves: List[SolveLog] = []

    def log_solve(
        self,
        width: int,
        height: int,
        report: SolverReport,
        duration: float = 0.0,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> SolveLog:
        """Log une résolution."""
        log = SolveLog(
            timestamp=datetime.now().isoformat(),
            width=width,
            height=height,
            status=report.status.value,
            rounds=report.rounds,
            safe_count=report.safe_count,
            flag_count=report.flag_count,
            failed_index=report.failed_index,
            duration=duration,
            metadata=metadata or {},
        )
        self.solves.append(log)
        self._write_log("solves", asdict(log))
        return log

    def save_session(self) -> str:
        """Sauvegarde la session complète."""
        session_file = self.log_dir / f"session_{self.session_id}.json"
        data = {
            "session_id": self.session_id,
            "total_solves": len(self.solves),
            "summary": self.get_summary(),
            "solves": [asdict(s) for s in self.solves],
        }
        with open(session_file, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        return str(session_file)

    def get_summary(self) -> Dict[str, Any]:
        """Retourne un résumé de la session."""
        by_status: Dict[str, int] = {}
        for s in self.solves:
            by_status[s.status] = by_status.get(s.status, 0) + 1
        solved = by_status.get("SOLVED", 0)

        return {
            "session_id": self.session_id,
            "solves": len(self.solves),
            "by_status": by_status,
            "safe_marks": sum(s.safe_count for s in self.solves),
            "flag_marks": sum(s.flag_count for s in self.solves),
            "total_duration": sum(s.duration for s in self.solves),
            "success_rate": solved / max(1, len(self.solves)),
        }

    def _write_log(self, log_type: str, data: Dict[str, Any]) -> None:
        """Écrit un log dans un fichier."""
        log_file = self.log_dir / f"{log_type}_{self.session_id}.jsonl"
        with open(log_file, "a", encoding="utf-8") as f:
            f.write(json.dumps(data, ensure_ascii=False) + "\n")


# === API fonctionnelle ===

_logger: Optional[DebugLogger] = None


def _get_logger() -> DebugLogger:
    global _logger
    if _logger is None:
        _logger = DebugLogger()
    return _logger


def log_solve(
    width: int,
    height: int,
    report: SolverReport,
    **kwargs,
) -> SolveLog:
    """Log une résolution."""
    return _get_logger().log_solve(width, height, report, **kwargs)
