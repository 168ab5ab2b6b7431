from cancer_app.utils.model_source import cache_location, is_remote_source


def test_remote_sources_are_detected():
    assert is_remote_source("https://storage.example.com/model.keras")
    assert is_remote_source("http://localhost/model.h5")
    assert not is_remote_source("/models/classification/model.keras")
    assert not is_remote_source("models/model.keras")


def test_cache_location_keeps_file_name():
    subdir, fname = cache_location("https://storage.example.com/v1/model.keras")
    assert fname == "model.keras"
    assert len(subdir) == 12


def test_cache_location_separates_urls_with_same_file_name():
    a, _ = cache_location("https://a.example.com/model.keras")
    b, _ = cache_location("https://b.example.com/model.keras")
    assert a != b
    assert cache_location("https://a.example.com/model.keras")[0] == a


def test_cache_location_defaults_file_name():
    assert cache_location("https://storage.example.com/")[1] == "model.keras"
