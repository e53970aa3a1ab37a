"""
logger.py

Logging module for huffpack.


"""


from datetime import datetime
from typing import Any, Dict, List, Optional, Union

class LogLevel:
    INFO = 0
    WARNING = 1
    ERROR = 2
    PROGRESS = 3


class Log:
    def __init__(self, type_name: str, level: int, message: str) -> None:
        self.level = level
        self.type_name = type_name
        self.message = message
        self.date = datetime.now()

    def __str__(self) -> str:
        return f"{self.date} - {self.type_name} - {self.level} - {self.message}"

    def __repr__(self) -> str:
        return self.__str__()


class SymbolFrequencyLog(Log):
    def __init__(self, symbol: Any, frequency: int) -> None:
        self.symbol = symbol
        self.frequency = frequency
        super().__init__("Symbol_frequency_log", LogLevel.INFO, f"Symbol: {symbol}, Frequency: {frequency}")


class CodeAssignmentLog(Log):
    def __init__(self, symbol: Any, code_length: int) -> None:
        self.symbol = symbol
        self.code_length = code_length
        super().__init__("Code_assignment_log", LogLevel.INFO, f"Symbol: {symbol}, Code length: {code_length}")


class CodingLog(Log):
    def __init__(self, symbol_count: int, encoded_bit_count: int) -> None:
        self.symbol_count = symbol_count
        self.encoded_bit_count = encoded_bit_count
        super().__init__("Coding_log", LogLevel.INFO, f"Symbol count: {symbol_count}, Encoded bits: {encoded_bit_count}")


class ContainerWriteLog(Log):
    def __init__(self, destination: str, byte_count: int) -> None:
        self.destination = destination
        self.byte_count = byte_count
        super().__init__("Container_write_log", LogLevel.INFO, f"Wrote {byte_count} bytes to {destination}")


class ProgressStep(Log):
    stage = "Progress_step"

    def __init__(self, message: str, total_steps: Optional[int] = None, steps: int = 1) -> None:
        if steps < 1:
            raise ValueError("Progress steps must be at least 1")
        self.base_message = message
        self.total_steps = total_steps
        self.steps = steps
        super().__init__(self.stage, LogLevel.PROGRESS, message)


class CountingProgressStep(ProgressStep):
    stage = "Counting_progress_step"


class TreeBuildingProgressStep(ProgressStep):
    stage = "Tree_building_progress_step"


class CodingProgressStep(ProgressStep):
    stage = "Coding_progress_step"


class Logger:
    def __init__(self) -> None:
        self.progress_counts: Dict[type, int] = {
            CountingProgressStep: 0,
            TreeBuildingProgressStep: 0,
            CodingProgressStep: 0,
        }

        self.logs: List[Log] = []

        self.record_info = True
        self.record_warning = True
        self.record_error = True
        self.record_progress = False

        self.display_info = False
        self.display_warning = True
        self.display_error = True
        self.display_progress = True

        self.step_intervals: Dict[type, int] = {
            CountingProgressStep: 10000,
            TreeBuildingProgressStep: 100,
            CodingProgressStep: 10000,
        }

    def log(self, log: Union[Log, str]) -> None:
        if not (isinstance(log, Log) or isinstance(log, str)):
            raise ValueError("Log must be an instance of Log class or a string")
        if isinstance(log, str):
            log = Log("General", LogLevel.INFO, log)

        if log.level == LogLevel.INFO:
            self._emit(log, self.record_info, self.display_info)
        elif log.level == LogLevel.WARNING:
            self._emit(log, self.record_warning, self.display_warning)
        elif log.level == LogLevel.ERROR:
            self._emit(log, self.record_error, self.display_error)
        elif log.level == LogLevel.PROGRESS:
            self._log_progress(log)

    def _emit(self, log: Log, record: bool, display: bool) -> None:
        if record:
            self.logs.append(log)
        if display:
            print(log)

    def _log_progress(self, log: Log) -> None:
        step_type = type(log)
        if step_type not in self.progress_counts:
            self._emit(log, self.record_progress, self.display_progress)
            return
        previous = self.progress_counts[step_type]
        self.progress_counts[step_type] += log.steps
        count = self.progress_counts[step_type]
        interval = self.step_intervals[step_type]
        if log.total_steps is not None:
            log.message = f"{log.base_message} ({count}/{log.total_steps})"
        else:
            log.message = f"{log.base_message} ({count})"
        display = self.display_progress and count // interval > previous // interval
        self._emit(log, self.record_progress, display)

    def get_step_interval(self, step_type: type) -> int:
        """Number of steps between displayed progress messages of a stage."""
        return self.step_intervals.get(step_type, 1)

    def get_logs(self, log_type: Optional[type] = None) -> List[Log]:
        if log_type is None:
            return list(self.logs)
        return [log for log in self.logs if isinstance(log, log_type)]

    def clear_logs(self) -> None:
        self.logs = []

    def save(self, file_path: str) -> None:
        with open(file_path, 'w') as file:
            for log in self.logs:
                file.write(str(log) + "\n")
