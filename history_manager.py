"""
History Manager for ChainCalc
Persists completed calculations and reads them back in order
"""
import json
import logging
from dataclasses import dataclass
from datetime import datetime

from database import Database
from errors import StoreError
from expression import token_from_dict, token_to_dict
from formatting import format_expression, format_number

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Calculation:
    expression: tuple
    result: float
    timestamp: datetime

    @classmethod
    def create(cls, expression, result):
        """Record a finished calculation stamped with the current time"""
        return cls(tuple(expression), float(result), datetime.now())


class HistoryStore:
    def __init__(self, db=None):
        self.db = db if db is not None else Database()

    def append(self, calculation):
        """Persist a calculation; durable once this returns"""
        payload = json.dumps([token_to_dict(token) for token in calculation.expression])
        # repr keeps inf and nan, which a REAL column would turn into NULL
        self.db.add_calculation(payload, repr(calculation.result), calculation.timestamp.isoformat())
        logger.info("Recorded %s = %s",
                    format_expression(calculation.expression),
                    format_number(calculation.result))

    def load(self, limit=None):
        """Return stored calculations in append order"""
        return [self._row_to_calculation(row) for row in self.db.get_calculations(limit)]

    def __len__(self):
        return self.db.count_calculations()

    def format_calculation_history(self, limit=None):
        """Format calculation history for display"""
        formatted = []
        for calc in self.load(limit):
            timestamp = calc.timestamp.strftime("%Y-%m-%d %H:%M:%S")
            formatted.append(
                f"{timestamp}: {format_expression(calc.expression)} = {format_number(calc.result)}"
            )
        return formatted

    @staticmethod
    def _row_to_calculation(row):
        expression_json, result, timestamp = row
        try:
            expression = tuple(token_from_dict(item) for item in json.loads(expression_json))
            return Calculation(expression, float(result), datetime.fromisoformat(timestamp))
        except (TypeError, ValueError) as e:
            raise StoreError(f"Corrupt calculation record: {e}") from e
