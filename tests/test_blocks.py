import pytest

from lsd import app
from lsd.app import ArgumentError, ErrorKind
from lsd.config_file import Config
from lsd.flags.blocks import Block, Blocks


def matches_of(*args):
    return app.build().get_matches_from(["lsd", *args])


def test_configure_from_without_long():
    assert Blocks.configure_from(matches_of(), Config.with_none()) == Blocks()


def test_default_is_name():
    assert Blocks().blocks == [Block.NAME]


def test_configure_from_with_long():
    assert Blocks.configure_from(matches_of("--long"), Config.with_none()) == Blocks.long()


def test_configure_from_with_blocks_and_without_long():
    result = Blocks.configure_from(matches_of("--blocks", "permission"), Config.with_none())
    assert result == Blocks([Block.PERMISSION])


def test_configure_from_with_blocks_and_long():
    result = Blocks.configure_from(
        matches_of("--long", "--blocks", "permission"), Config.with_none()
    )
    assert result == Blocks([Block.PERMISSION])


def test_configure_from_with_inode():
    result = Blocks.configure_from(matches_of("--inode"), Config.with_none())
    assert result == Blocks([Block.INODE, Block.NAME])


def test_configure_from_prepend_inode_without_long():
    result = Blocks.configure_from(
        matches_of("--blocks", "permission", "--inode"), Config.with_none()
    )
    assert result == Blocks([Block.INODE, Block.PERMISSION])


def test_configure_from_prepend_inode_with_long():
    result = Blocks.configure_from(
        matches_of("--long", "--blocks", "permission", "--inode"), Config.with_none()
    )
    assert result == Blocks([Block.INODE, Block.PERMISSION])


def test_configure_from_ignore_prepend_inode_without_long():
    result = Blocks.configure_from(
        matches_of("--blocks", "permission,inode", "--inode"), Config.with_none()
    )
    assert result == Blocks([Block.PERMISSION, Block.INODE])


def test_configure_from_ignore_prepend_inode_with_long():
    result = Blocks.configure_from(
        matches_of("--long", "--blocks", "permission,inode", "--inode"), Config.with_none()
    )
    assert result == Blocks([Block.PERMISSION, Block.INODE])


def test_configure_from_long_uses_config():
    c = Config.with_none()
    c.blocks = ["name", "size"]
    result = Blocks.configure_from(matches_of("--long"), c)
    assert result == Blocks([Block.NAME, Block.SIZE])


def test_configure_from_long_ignore_config():
    c = Config.with_none()
    c.blocks = ["name", "size"]
    result = Blocks.configure_from(matches_of("--long", "--ignore-config"), c)
    assert result == Blocks.long()


def test_configure_from_without_long_ignores_config():
    c = Config.with_none()
    c.blocks = ["name", "size"]
    assert Blocks.configure_from(matches_of(), c) == Blocks()


def test_from_arg_matches_none():
    assert Blocks.from_arg_matches(matches_of()) is None


def test_from_arg_matches_one():
    assert Blocks.from_arg_matches(matches_of("--blocks", "permission")) == Blocks(
        [Block.PERMISSION]
    )


def test_from_arg_matches_multi_occurences():
    result = Blocks.from_arg_matches(matches_of("--blocks", "permission", "--blocks", "name"))
    assert result == Blocks([Block.PERMISSION, Block.NAME])


def test_from_arg_matches_multi_values():
    result = Blocks.from_arg_matches(matches_of("--blocks", "permission,name"))
    assert result == Blocks([Block.PERMISSION, Block.NAME])


def test_from_arg_matches_reversed_default():
    result = Blocks.from_arg_matches(
        matches_of("--blocks", "name,date,size,group,user,permission")
    )
    assert result == Blocks(
        [Block.NAME, Block.DATE, Block.SIZE, Block.GROUP, Block.USER, Block.PERMISSION]
    )


def test_from_arg_matches_every_second_one():
    result = Blocks.from_arg_matches(matches_of("--blocks", "permission,group,date"))
    assert result == Blocks([Block.PERMISSION, Block.GROUP, Block.DATE])


def test_invalid_block_argument_rejected():
    with pytest.raises(ArgumentError) as info:
        matches_of("--blocks", "foo")
    assert info.value.kind == ErrorKind.INVALID_VALUE


def test_from_config_none():
    assert Blocks.from_config(Config.with_none()) is None


def test_from_config_one():
    c = Config.with_none()
    c.blocks = ["permission"]
    assert Blocks.from_config(c) == Blocks([Block.PERMISSION])


def test_from_config_reversed_default():
    c = Config.with_none()
    c.blocks = ["name", "date", "size", "group", "user", "permission"]
    assert Blocks.from_config(c) == Blocks(
        [Block.NAME, Block.DATE, Block.SIZE, Block.GROUP, Block.USER, Block.PERMISSION]
    )


def test_from_config_every_second_one():
    c = Config.with_none()
    c.blocks = ["permission", "group", "date"]
    assert Blocks.from_config(c) == Blocks([Block.PERMISSION, Block.GROUP, Block.DATE])


def test_from_config_invalid_is_ignored(capsys):
    c = Config.with_none()
    c.blocks = ["permission", "foo", "date"]
    assert Blocks.from_config(c) == Blocks([Block.PERMISSION, Block.DATE])
    assert "Not a valid block name: foo" in capsys.readouterr().err


def test_from_config_all_invalid_is_none():
    c = Config.with_none()
    c.blocks = ["foo"]
    assert Blocks.from_config(c) is None


def test_optional_prepend_inode_is_idempotent():
    blocks = Blocks([Block.NAME])
    blocks.optional_prepend_inode()
    blocks.optional_prepend_inode()
    assert blocks.blocks == [Block.INODE, Block.NAME]


def test_block_err():
    with pytest.raises(ValueError, match="^Not a valid block name: foo$"):
        Block.try_from("foo")


@pytest.mark.parametrize(
    "name, block",
    [
        ("permission", Block.PERMISSION),
        ("user", Block.USER),
        ("group", Block.GROUP),
        ("size", Block.SIZE),
        ("size_value", Block.SIZE_VALUE),
        ("date", Block.DATE),
        ("name", Block.NAME),
        ("inode", Block.INODE),
    ],
)
def test_block_try_from(name, block):
    assert Block.try_from(name) == block