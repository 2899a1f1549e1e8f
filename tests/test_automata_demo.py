from automata_demo import decode_input


def test_decode_escapes():
    assert decode_input("// x\\n") == "// x\n"
    assert decode_input("a\\tb") == "a\tb"
    assert decode_input("a\\\\n") == "a\\n"
    assert decode_input("\\q") == "\\q"
    assert decode_input("") == ""
