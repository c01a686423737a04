from optspec.banner import banner_for, build_doc, column_widths
from optspec.spec import compile_specs

SPECS = [
    ["-p", "--port", "Port", "default", 3000, "parse", int],
    ["--[no-]verbose"],
]


def test_build_doc():
    port, verbose = compile_specs(SPECS)
    assert build_doc(port) == ["-p, --port", "3000", "Port"]
    assert build_doc(verbose) == ["--no-verbose, --verbose", "False", ""]


def test_no_default_renders_empty():
    [host] = compile_specs([["--host", "Host"]])
    assert build_doc(host) == ["--host", "", "Host"]


def test_column_widths():
    assert column_widths([["ab", "c"], ["a", "cde"]]) == [2, 3]


def test_banner_layout():
    banner = banner_for(compile_specs(SPECS))
    assert banner == (
        "Usage:\n"
        "\n"
        " Switches                 Default  Desc \n"
        " --------                 -------  ---- \n"
        " -p, --port               3000     Port \n"
        " --no-verbose, --verbose  False         \n"
    )


def test_rows_share_column_widths():
    banner = banner_for(compile_specs(SPECS + [["-c", "--config", "Path to the configuration file"]]))
    rows = banner.splitlines()[2:]
    assert len(rows) == 5
    assert len({len(row) for row in rows}) == 1
    desc_column = rows[0].index("Desc")
    assert all(row[desc_column - 2:desc_column] == "  " for row in rows)
