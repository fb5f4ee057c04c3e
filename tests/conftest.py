from graphwalker.testing import graphwalker_tmp_config, mock_graph

__all__ = ["graphwalker_tmp_config", "mock_graph"]
