"""
Progress Reporter - byte progress bar around a readable stream
"""
from typing import BinaryIO

from tqdm import tqdm
from tqdm.utils import CallbackIOWrapper


class ProgressReporter:
    """
    Wraps a binary stream so every read() advances a tqdm bar sized to total.

    ``reader`` is the wrapped stream to hand to the consumer. Other attributes
    (seek, tell, ...) pass straight through to the underlying stream and bytes
    are returned unchanged.
    """

    def __init__(self, stream: BinaryIO, total: int, desc: str = None, **bar_options):
        bar_options.setdefault('unit', 'B')
        bar_options.setdefault('unit_scale', True)
        bar_options.setdefault('unit_divisor', 1024)
        self.bar = tqdm(total=total, desc=desc, **bar_options)
        self.reader = CallbackIOWrapper(self.bar.update, stream, 'read')

    @property
    def count(self) -> int:
        """Bytes read so far"""
        return self.bar.n

    def finish(self) -> None:
        self.bar.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.finish()
        return False
