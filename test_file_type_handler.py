import pytest

from default_context_initializer import DefaultContextInitializer
from file_type_handler import FileTypeHandler
from formal_context import FormalContext


def test_cxt_save_then_load_preserves_context(tmp_path):
    ctx = DefaultContextInitializer().seeded().set_object_name(2, "duck")
    handler = FileTypeHandler(str(tmp_path / "animals.cxt"))
    handler.save(ctx)

    loaded = FileTypeHandler(str(tmp_path / "animals.cxt")).load_or_create()
    assert loaded == ctx


def test_format_cxt_layout():
    ctx = FormalContext.from_names(["a", "b"], ["p"], [(1, 0)])
    assert FileTypeHandler.format_cxt(ctx) == "B\n\n2\n1\n\na\nb\np\n.\nX\n"


def test_parse_cxt_accepts_named_context():
    text = "B\nbirds\n2\n2\n\nduck\nowl\nswims\nflies\nXX\n.X\n"
    ctx = FileTypeHandler.parse_cxt(text)
    assert ctx.object_names() == ("duck", "owl")
    assert ctx.attribute_names() == ("swims", "flies")
    assert ctx.relation == {(0, 0), (0, 1), (1, 1)}


@pytest.mark.parametrize(
    "text",
    [
        "",
        "A\n\n1\n1\n\na\nb\nX\n",
        "B\n\n2\n1\n\na\nb\nc\nX\n",
        "B\n\n1\n2\n\na\nb\nc\nX\n",
        "B\n\n1\n1\n\na\nb\n?\n",
    ],
)
def test_parse_cxt_rejects_malformed(text):
    with pytest.raises(ValueError):
        FileTypeHandler.parse_cxt(text)


def test_missing_file_yields_default_context(tmp_path):
    handler = FileTypeHandler(str(tmp_path / "new.cxt"))
    assert handler.load_or_create() == DefaultContextInitializer().seeded()

    handler = FileTypeHandler(str(tmp_path / "new.csv"), initial_variant="empty")
    assert handler.load_or_create().object_count() == 0


def test_csv_cross_table_loads_truthy_cells(tmp_path):
    path = tmp_path / "ctx.csv"
    path.write_text("object,swims,flies\nduck,X,yes\nowl,,1\nfish,true,\n")
    ctx = FileTypeHandler(str(path)).load_or_create()
    assert ctx.object_names() == ("duck", "owl", "fish")
    assert ctx.attribute_names() == ("swims", "flies")
    assert ctx.relation == {(0, 0), (0, 1), (1, 1), (2, 0)}


def test_csv_save_then_load(tmp_path):
    ctx = DefaultContextInitializer().seeded()
    handler = FileTypeHandler(str(tmp_path / "ctx.csv"))
    handler.save(ctx)
    assert handler.load_or_create() == ctx


def test_unsupported_extension_exits(tmp_path):
    with pytest.raises(SystemExit):
        FileTypeHandler(str(tmp_path / "ctx.xlsx"))


def test_csv_keeps_repeated_attribute_names(tmp_path):
    ctx = DefaultContextInitializer().seeded().set_attribute_name(1, "Attribute 0")
    handler = FileTypeHandler(str(tmp_path / "dup.csv"))
    handler.save(ctx)

    loaded = handler.load_or_create()
    assert loaded.attribute_names() == (
        "Attribute 0",
        "Attribute 0",
        "Attribute 2",
        "Attribute 3",
    )
    assert loaded == ctx


def test_cxt_keeps_empty_object_name(tmp_path):
    csv_path = tmp_path / "blank.csv"
    csv_path.write_text("object,a\n,X\nb,\n")
    ctx = FileTypeHandler(str(csv_path)).load_or_create()
    assert ctx.object_names() == ("", "b")

    handler = FileTypeHandler(str(tmp_path / "blank.cxt"))
    handler.save(ctx)
    loaded = handler.load_or_create()
    assert loaded.object_names() == ("", "b")
    assert loaded.relation == {(0, 0)}
    assert loaded == ctx


def test_parse_cxt_with_blank_names_after_separator():
    text = "B\n\n2\n2\n\n\nowl\n\nflies\n.X\nXX\n"
    ctx = FileTypeHandler.parse_cxt(text)
    assert ctx.object_names() == ("", "owl")
    assert ctx.attribute_names() == ("", "flies")
    assert ctx.relation == {(0, 1), (1, 0), (1, 1)}
