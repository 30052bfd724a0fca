from dodeca.report import format_report_text, generate_report, main


def test_faces_checked_against_derived_edges():
    report = generate_report()

    assert report['edges']['edge_count'] == 30
    assert all(r['valid'] for r in report['faces'])
    assert report['tiling']['closed']
    assert report['solid'] is not None
    assert report['solid']['valid']


def test_report_text():
    text = format_report_text(generate_report())

    assert "Number of edges at this length: 30" in text
    assert "Closed surface: yes" in text
    assert "DODECAHEDRON SHAPE ANALYSIS" in text
    assert "Valid solid:        yes" in text


def test_main(capsys):
    assert main() == 0
    assert "SOLID CHECK" in capsys.readouterr().out
