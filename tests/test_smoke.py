def test_import() -> None:
    import walkgraph
    from walkgraph import __version__
    assert isinstance(__version__, str)
    assert walkgraph.Graph is walkgraph.graph.Graph


def test_public_errors_share_a_base() -> None:
    from walkgraph import (
        EmptyContainerError,
        GraphError,
        IndexOutOfBoundsError,
        InvalidArgumentError,
        LabelNotFoundError,
    )

    for exc_type in (EmptyContainerError, IndexOutOfBoundsError, InvalidArgumentError, LabelNotFoundError):
        assert issubclass(exc_type, GraphError)
    assert issubclass(IndexOutOfBoundsError, IndexError)
    assert issubclass(InvalidArgumentError, ValueError)
