import matplotlib

matplotlib.use("Agg")

import pytest

from gda import Observation


@pytest.fixture
def two_clusters():
    return [
        Observation(0.0, 0.0, 0),
        Observation(0.0, 1.0, 0),
        Observation(5.0, 5.0, 1),
        Observation(5.0, 6.0, 1),
    ]


@pytest.fixture
def spread_data():
    # class covariances are non-degenerate in both directions
    return [
        Observation(1.0, 2.0, 0),
        Observation(2.0, 1.0, 0),
        Observation(0.0, 0.0, 0),
        Observation(1.5, 0.5, 0),
        Observation(4.0, 5.0, 1),
        Observation(6.0, 4.0, 1),
        Observation(5.0, 6.5, 1),
    ]


@pytest.fixture
def write_csv(tmp_path):
    def _write(name, text):
        path = tmp_path / name
        path.write_text(text)
        return str(path)

    return _write


@pytest.fixture
def spread_csv(write_csv):
    return write_csv(
        "spread.csv",
        "x,y,class\n"
        "1.0,2.0,0\n"
        "2.0,1.0,0\n"
        "0.0,0.0,0\n"
        "1.5,0.5,0\n"
        "4.0,5.0,1\n"
        "6.0,4.0,1\n"
        "5.0,6.5,1\n",
    )
