import numpy as np
import pytest

from aad_mlp.nn import MLP, TrainingConfig, build_network, train
import train_mlp

XS = [
    [2.0, 3.0, -1.0],
    [3.0, -1.0, 0.5],
    [0.5, 1.0, 1.0],
    [1.0, 1.0, -1.0],
]
YS = [1.0, -1.0, -1.0, 1.0]


@pytest.mark.parametrize("seed", [0, 1, 42])
def test_loss_decreases_over_twenty_epochs(seed):
    config = TrainingConfig(epochs=20, learning_rate=0.01, seed=seed, verbose=False)
    net = build_network(3, [4, 4, 1], config)
    result = train(net, XS, YS, config)

    mse = result['mse_history']
    assert len(mse) == 20
    assert len(result['loss_history']) == 20
    assert mse[19] < mse[0]
    assert result['loss_history'][0] == pytest.approx(4 * mse[0])
    assert len(result['predictions']) == 4
    assert all(-1.0 < p < 1.0 for p in result['predictions'])


def test_build_network_is_reproducible():
    config = TrainingConfig(seed=11, verbose=False)
    a = build_network(3, [4, 4, 1], config)
    b = build_network(3, [4, 4, 1], config)
    assert [p.value for p in a.parameters()] == [p.value for p in b.parameters()]

    ra = train(a, XS, YS, config)
    rb = train(b, XS, YS, config)
    assert ra['loss_history'] == rb['loss_history']


def test_verbose_prints_each_epoch(capsys):
    config = TrainingConfig(epochs=3, seed=0, verbose=True)
    train(build_network(3, [4, 1], config), XS, YS, config)
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 3
    assert lines[0].startswith("Epoch: 0, loss: ")
    assert lines[2].startswith("Epoch: 2, loss: ")


def test_zero_epochs_leaves_network_untouched():
    config = TrainingConfig(epochs=0, seed=0, verbose=False)
    net = build_network(3, [2, 1], config)
    before = [p.value for p in net.parameters()]
    result = train(net, XS, YS, config)
    assert result['loss_history'] == []
    assert [p.value for p in net.parameters()] == before


def test_train_rejects_mismatched_data():
    net = MLP(3, [2, 1], rng=np.random.default_rng(0))
    with pytest.raises(ValueError):
        train(net, XS, YS[:3], TrainingConfig(verbose=False))


def test_train_rejects_multi_output_network():
    net = MLP(3, [2, 2], rng=np.random.default_rng(0))
    with pytest.raises(ValueError):
        train(net, XS, YS, TrainingConfig(verbose=False))


def test_non_finite_loss_is_flagged():
    net = MLP(3, [2, 1], rng=np.random.default_rng(0))
    net.parameters()[0].value = np.nan
    with pytest.warns(RuntimeWarning, match="Non-finite loss"):
        result = train(net, XS, YS, TrainingConfig(epochs=1, verbose=False))
    assert np.isnan(result['loss_history'][0])


def test_command_line_driver(capsys):
    result = train_mlp.main(["--epochs", "5", "--seed", "0", "--quiet"])
    out = capsys.readouterr().out
    assert len(result['loss_history']) == 5
    assert "Epoch:" not in out
    assert "Final loss:" in out
    assert "MLP(3 -> 4 -> 4 -> 1)" in out


def test_parse_layers():
    assert train_mlp.parse_layers("4,4,1") == [4, 4, 1]
    assert train_mlp.parse_layers(" 8, 1 ") == [8, 1]
