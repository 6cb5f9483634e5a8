import time
from typing import Any, Dict, Iterable, List, Optional

from src.config import PATHS, SOLVER_CONFIG
from src.lib.s0_payload import decode_payload
from src.lib.s3_grid import grid_to_string
from src.lib.s4_solver import Solver
from src.lib.s7_debug import DebugLogger


class SolverService:
    """
    Point d'entrée : payload brut -> décodage -> solver -> messages.
    Les payloads mal formés lèvent InvalidPayloadError (pas de résolution tentée).
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None, logger: Optional[DebugLogger] = None):
        self.config = {**SOLVER_CONFIG, **(config or {})}
        self.solver = Solver()
        self.logger = logger
        if self.logger is None and self.config.get('log_solves'):
            self.logger = DebugLogger(self.config.get('log_dir', PATHS['logs']))

    def process_instruction(self, data: bytes) -> Dict[str, Any]:
        """
        Décode et résout un payload [largeur, hauteur, cellules...].
        """
        payload = decode_payload(data)
        messages: List[str] = [grid_to_string(payload.grid, payload.width)]

        start = time.perf_counter()
        report = self.solver.solve_with_report(payload.grid, payload.width, payload.height)
        duration = time.perf_counter() - start

        if report.success:
            message = "Solution trouvée !"
            messages.append(f"{message}\n{grid_to_string(report.solution, payload.width)}")
        else:
            message = "La grille semble insoluble !"
            messages.append(message)

        if self.logger is not None:
            self.logger.log_solve(payload.width, payload.height, report, duration=duration)

        return {
            'success': report.success,
            'message': message,
            'width': payload.width,
            'height': payload.height,
            'grid': payload.grid,
            'solution': report.solution,
            'report': report,
            'messages': messages,
        }

    def process_batch(self, payloads: Iterable[bytes]) -> List[Dict[str, Any]]:
        """Résout une série de payloads (mode --random)."""
        return [self.process_instruction(data) for data in payloads]

    def close(self) -> Optional[str]:
        """Sauvegarde la session de logs si le logging est actif."""
        if self.logger is None:
            return None
        return self.logger.save_session()
