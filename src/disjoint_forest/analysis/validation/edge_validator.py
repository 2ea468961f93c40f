"""Validator for edge-list CSV data."""

import logging

import pandas as pd

from disjoint_forest.analysis.graph_types import SOURCE_COLUMN, TARGET_COLUMN, WEIGHT_COLUMN

logger = logging.getLogger(__name__)


class EdgeListValidator:
    """Validates edge-list DataFrames before they reach the forest."""

    # Required columns for edge lists
    EDGE_COLUMNS = [SOURCE_COLUMN, TARGET_COLUMN]

    def validate_edges(self, df: pd.DataFrame, source: str = "") -> pd.DataFrame:
        """Validate an edge-list DataFrame.

        Args:
            df: DataFrame to validate
            source: Source identifier for logging (e.g., file path)

        Returns:
            Validated DataFrame (same as input)

        Note:
            Validation errors are logged as warnings but do not stop processing.
            Empty DataFrame is valid (graph without edges).
        """
        if len(df) == 0:
            return df

        source_info = f" ({source})" if source else ""

        missing_cols = set(self.EDGE_COLUMNS) - set(df.columns)
        if missing_cols:
            logger.warning(f"edges missing required columns{source_info}: {missing_cols}")

        for col in self.EDGE_COLUMNS:
            if col not in df.columns:
                continue
            if df[col].isna().any():
                missing_count = df[col].isna().sum()
                logger.warning(f"edges has {missing_count} missing values in '{col}'{source_info}")
            if not pd.api.types.is_numeric_dtype(df[col]):
                logger.warning(f"edges column '{col}' should be numeric{source_info}")
            elif (df[col] < 0).any():
                negative_count = (df[col] < 0).sum()
                logger.warning(
                    f"edges has {negative_count} rows with negative '{col}'{source_info}"
                )

        if WEIGHT_COLUMN in df.columns:
            if not pd.api.types.is_numeric_dtype(df[WEIGHT_COLUMN]):
                logger.warning(f"edges column '{WEIGHT_COLUMN}' should be numeric{source_info}")
            elif df[WEIGHT_COLUMN].isna().any():
                missing_count = df[WEIGHT_COLUMN].isna().sum()
                logger.warning(
                    f"edges has {missing_count} missing values in '{WEIGHT_COLUMN}'{source_info}"
                )

        if SOURCE_COLUMN in df.columns and TARGET_COLUMN in df.columns:
            self_loops = df[df[SOURCE_COLUMN] == df[TARGET_COLUMN]]
            if len(self_loops) > 0:
                logger.warning(f"edges has {len(self_loops)} self-loops{source_info}")

        return df

    def infer_num_nodes(self, df: pd.DataFrame) -> int:
        """Infer the number of nodes as the largest endpoint plus one.

        Args:
            df: Edge-list DataFrame

        Returns:
            max(source, target) + 1, or 0 for an empty edge list

        Raises:
            ValueError: If an endpoint column is not numeric
        """
        if len(df) == 0:
            return 0

        largest = -1
        for col, position in ((SOURCE_COLUMN, 0), (TARGET_COLUMN, 1)):
            column = df[col] if col in df.columns else df[position]
            if not pd.api.types.is_numeric_dtype(column):
                raise ValueError(f"Cannot infer node count: column '{col}' is not numeric")
            if column.notna().any():
                largest = max(largest, int(column.max()))
        return largest + 1
