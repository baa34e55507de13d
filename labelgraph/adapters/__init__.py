from .dataframe_adapter import to_dataframes, from_dataframes

__all__ = ["to_dataframes", "from_dataframes"]

# N.B. The networkx adapter needs the optional 'networkx' extra; import it
# explicitly as labelgraph.adapters.networkx.
