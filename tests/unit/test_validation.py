import pytest

from domain.taints.validation import is_dns1123_subdomain, is_qualified_name, is_valid_label_value


@pytest.mark.parametrize(
    "name",
    [
        "a",
        "dedicated",
        "My.Name_1-x",
        "a" * 63,
        "example.com/dedicated",
        "node.kubernetes.io/unreachable",
        "k8s.io/" + "b" * 63,
    ],
)
def test_valid_qualified_names(name: str) -> None:
    assert is_qualified_name(name) == []


@pytest.mark.parametrize(
    "name",
    [
        "",
        "a" * 64,
        "-dash",
        "dash-",
        ".dot",
        "has space",
        "a/b/c",
        "/name",
        "Example.com/name",  # prefix must be lowercase
        "example.com/",
        "rā",
        "name\n",
    ],
)
def test_invalid_qualified_names(name: str) -> None:
    assert is_qualified_name(name) != []


def test_empty_name_part_message() -> None:
    assert is_qualified_name("") == ["name part must be non-empty"]


def test_empty_prefix_message() -> None:
    assert is_qualified_name("/name") == ["prefix part must be non-empty"]


def test_prefix_errors_are_labelled() -> None:
    errs = is_qualified_name("Bad_Prefix/name")

    assert len(errs) == 1
    assert errs[0].startswith("prefix part a lowercase RFC 1123 subdomain")


@pytest.mark.parametrize("value", ["", "abc", "a" * 63, "1.2.3", "gpu_a100-x"])
def test_valid_label_values(value: str) -> None:
    assert is_valid_label_value(value) == []


@pytest.mark.parametrize("value", ["a" * 64, "-abc", "abc.", "a b", "%^@", "a/b"])
def test_invalid_label_values(value: str) -> None:
    assert is_valid_label_value(value) != []


def test_label_value_length_message() -> None:
    assert "must be no more than 63 characters" in is_valid_label_value("a" * 64)


def test_dns1123_subdomain_length_limit() -> None:
    label = "a" * 63
    ok = ".".join([label, label, label, "a" * 61])  # 253 chars
    too_long = ok + "a"

    assert len(ok) == 253
    assert is_dns1123_subdomain(ok) == []
    assert "must be no more than 253 characters" in is_dns1123_subdomain(too_long)
