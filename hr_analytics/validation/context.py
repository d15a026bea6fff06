"""Great Expectations context and batch management.

Uses an ephemeral (in-memory) context so validation needs no GX project
directory and persists nothing.
"""

import great_expectations as gx
import pandas as pd


def get_data_context():
    """Return a fresh ephemeral Great Expectations context."""
    return gx.get_context(mode="ephemeral")


def get_dataframe_batch(context, name: str, df: pd.DataFrame):
    """Register ``df`` as a whole-dataframe batch named after its table."""
    data_source = context.data_sources.add_pandas(name=f"{name}_source")
    data_asset = data_source.add_dataframe_asset(name=name)
    batch_definition = data_asset.add_batch_definition_whole_dataframe(f"{name}_batch")
    return batch_definition.get_batch(batch_parameters={"dataframe": df})
