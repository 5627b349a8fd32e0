"""
Text Loader Module
Loads texts to encode (or dollcode to decode) from text, CSV and parquet files
"""

import logging
import pandas as pd
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = ('.txt', '.csv', '.parquet')


def escape_surrogates(text: str) -> str:
    """
    Replace lone surrogates with \\uXXXX escapes so the text can be written as UTF-8.

    Args:
        text: Text that may hold lone surrogates (e.g. decoded U+D800-U+DFFF groups)

    Returns:
        str: Text that encodes to UTF-8 without errors
    """
    return text.encode('utf-8', 'backslashreplace').decode('utf-8')


def split_lines(text: str) -> list:
    """
    Split text on \\n (and \\r\\n) only; other line boundaries stay inside a row.

    Args:
        text: File contents

    Returns:
        list: Lines without their line endings
    """
    if text.endswith('\n'):
        text = text[:-1]
    if not text:
        return []
    return [line[:-1] if line.endswith('\r') else line for line in text.split('\n')]


class TextLoader:
    """
    Loads a column of strings into a DataFrame.

    File formats:
    - .txt: one row per line
    - .csv: any CSV with a header row
    - .parquet: any parquet file
    """

    def __init__(self, data_dir: str = "."):
        """
        Initialize text loader.

        Args:
            data_dir: Directory that relative paths are resolved against
        """
        self.data_dir = Path(data_dir)

    def _resolve(self, path: Union[str, Path]) -> Path:
        path = Path(path)
        if not path.is_absolute():
            path = self.data_dir / path
        return path

    def load(self, path: Union[str, Path], column: str = "text") -> pd.DataFrame:
        """
        Load a file into a DataFrame.

        Args:
            path: File to load
            column: Column holding the strings (for .txt files, the name
                given to the single column)

        Returns:
            pd.DataFrame: Loaded rows, with the column coerced to str

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file type is unsupported or the column is missing
        """
        path = self._resolve(path)

        if not path.exists():
            raise FileNotFoundError(f"Input file not found: {path}")

        suffix = path.suffix.lower()
        if suffix == '.txt':
            # Bytes, so that universal newlines do not turn a lone \r into a line break
            lines = split_lines(path.read_bytes().decode('utf-8'))
            df = pd.DataFrame({column: lines})
        elif suffix == '.csv':
            df = pd.read_csv(path, dtype=str, keep_default_na=False, encoding='utf-8')
        elif suffix == '.parquet':
            df = pd.read_parquet(path)
        else:
            raise ValueError(
                f"Unsupported file type: '{suffix}'. "
                f"Supported types: {', '.join(SUPPORTED_SUFFIXES)}"
            )

        if column not in df.columns:
            raise ValueError(f"Column '{column}' not found in {path.name}. Columns: {df.columns.tolist()}")

        df[column] = df[column].fillna('').astype(str)

        logger.info(f"Loaded {len(df)} rows from {path.name}")
        return df

    def save(self, df: pd.DataFrame, path: Union[str, Path]) -> Path:
        """
        Write a DataFrame to .csv or .parquet, chosen by suffix.

        Args:
            df: DataFrame to write
            path: Destination file

        Returns:
            Path: Resolved destination
        """
        path = self._resolve(path)
        suffix = path.suffix.lower()

        path.parent.mkdir(parents=True, exist_ok=True)

        if suffix == '.csv':
            df.to_csv(path, index=False, encoding='utf-8', errors='backslashreplace')
        elif suffix == '.parquet':
            df = df.copy()
            for name in df.columns:
                if not (df[name].dtype == object or pd.api.types.is_string_dtype(df[name].dtype)):
                    continue
                df[name] = df[name].map(lambda value: escape_surrogates(value) if isinstance(value, str) else value)
            df.to_parquet(path, index=False)
        else:
            raise ValueError(f"Unsupported output type: '{suffix}'. Supported types: .csv, .parquet")

        logger.info(f"Wrote {len(df)} rows to {path.name}")
        return path
