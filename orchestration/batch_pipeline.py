"""
Batch Pipeline
Encodes or decodes a whole DataFrame column and keeps running error statistics
"""

import logging
import pandas as pd
from typing import Any, Dict

from dollcode import CharacterSet, DEFAULT_CHARSET, DollcodeCodec

logger = logging.getLogger(__name__)


class BatchPipeline:
    """
    Runs the dollcode codec over DataFrame columns.

    Decoding never fails on bad rows; each row reports its own error count
    and the pipeline accumulates totals across calls.
    """

    def __init__(self, charset: CharacterSet = DEFAULT_CHARSET):
        """
        Initialize batch pipeline.

        Args:
            charset: Character set for encoding and decoding
        """
        self.codec = DollcodeCodec(charset)

        self.rows_encoded = 0
        self.rows_decoded = 0
        self.rows_with_errors = 0
        self.total_error_groups = 0

    @staticmethod
    def _require_column(df: pd.DataFrame, column: str):
        if column not in df.columns:
            raise ValueError(f"Column '{column}' not found. Columns: {df.columns.tolist()}")

    def encode_frame(
        self,
        df: pd.DataFrame,
        column: str = "text",
        output_column: str = "dollcode"
    ) -> pd.DataFrame:
        """
        Encode every row of a column.

        Args:
            df: Input rows
            column: Column holding plain text
            output_column: Column to write dollcode into

        Returns:
            pd.DataFrame: Copy of df with output_column added
        """
        self._require_column(df, column)

        result = df.copy()
        result[output_column] = [self.codec.encode(str(value)) for value in df[column]]

        self.rows_encoded += len(result)
        logger.info(f"Encoded {len(result)} rows from column '{column}'")
        return result

    def decode_frame(
        self,
        df: pd.DataFrame,
        column: str = "dollcode",
        output_column: str = "text"
    ) -> pd.DataFrame:
        """
        Decode every row of a column.

        Args:
            df: Input rows
            column: Column holding dollcode
            output_column: Column to write decoded text into

        Returns:
            pd.DataFrame: Copy of df with output_column, has_errors and
            error_count columns added
        """
        self._require_column(df, column)

        results = [self.codec.decode(str(value)) for value in df[column]]

        result = df.copy()
        # object dtype: decoded text may hold lone surrogates
        result[output_column] = pd.Series([decoded.text for decoded in results], index=result.index, dtype=object)
        result['has_errors'] = [decoded.has_errors for decoded in results]
        result['error_count'] = [decoded.error_count for decoded in results]

        rows_with_errors = int(result['has_errors'].sum())
        error_groups = int(result['error_count'].sum())

        self.rows_decoded += len(result)
        self.rows_with_errors += rows_with_errors
        self.total_error_groups += error_groups

        if rows_with_errors:
            logger.warning(f"{rows_with_errors} of {len(result)} rows had invalid groups ({error_groups} total)")
        logger.info(f"Decoded {len(result)} rows from column '{column}'")
        return result

    def get_stats(self) -> Dict[str, Any]:
        """
        Get running totals.

        Returns:
            dict: rows_encoded, rows_decoded, rows_with_errors, total_error_groups
        """
        return {
            'rows_encoded': self.rows_encoded,
            'rows_decoded': self.rows_decoded,
            'rows_with_errors': self.rows_with_errors,
            'total_error_groups': self.total_error_groups
        }
