"""
Test that every package of the restructured codebase imports cleanly
"""


def test_dollcode_imports():
    """Core package exposes the public API"""
    import dollcode

    for name in dollcode.__all__:
        assert hasattr(dollcode, name), name


def test_data_imports():
    from data import TextLoader
    from data.text_loader import SUPPORTED_SUFFIXES

    assert TextLoader
    assert '.csv' in SUPPORTED_SUFFIXES


def test_orchestration_imports():
    from orchestration import BatchPipeline

    pipeline = BatchPipeline()
    assert pipeline.get_stats()['rows_encoded'] == 0


def test_main_imports():
    import main

    assert callable(main.main)
