from gadgetry.buffer import Buffer


def test_write_and_format():
    buf = Buffer()
    buf.write("a")
    buf.write("%d-%s", 1, "x")
    buf.writeln("end")
    assert buf.getvalue() == "a1-xend\n"


def test_write_without_args_is_not_formatted():
    buf = Buffer()
    buf.write("100%")
    assert buf.getvalue() == "100%"


def test_writeln_formats():
    buf = Buffer()
    buf.writeln("%s=%s", "k", "v")
    buf.writeln("")
    assert str(buf) == "k=v\n\n"
    assert len(buf) == len("k=v\n\n")


def test_empty_buffer():
    assert Buffer().getvalue() == ""