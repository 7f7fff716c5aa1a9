import pytest

from beets_deployments.numbers import ONE, bn, format_units, fp, scale, to_normalized_weights


def test_fp_scales_by_1e18():
    assert fp(1) == ONE
    assert fp(0.0025) == 2_500_000_000_000_000
    assert fp("0.00051") == 510_000_000_000_000
    assert fp("33.333333333333333333") == 33_333_333_333_333_333_333


def test_scale_uses_token_decimals():
    assert scale("1.5", 6) == 1_500_000
    assert scale("0.000034", 8) == 3_400
    assert scale(10, 0) == 10


def test_scale_rejects_amounts_finer_than_the_token():
    with pytest.raises(ValueError, match="6 decimal places"):
        scale("1.0000001", 6)
    assert scale("1.000000", 6) == 1_000_000


def test_bn_rejects_fractions():
    assert bn("1000") == 1000
    with pytest.raises(ValueError):
        bn("1.5")


def test_equal_thirds_normalize_with_remainder_on_last_weight():
    third = fp("33.333333333333333333")
    weights = to_normalized_weights([third, third, third])
    assert weights == [333_333_333_333_333_333, 333_333_333_333_333_333, 333_333_333_333_333_334]
    assert sum(weights) == ONE


def test_normalized_weights_already_summing_to_one_are_unchanged():
    weights = [fp("0.8"), fp("0.2")]
    assert to_normalized_weights(weights) == weights


def test_hundred_weights_are_split_evenly():
    weights = to_normalized_weights([7] * 100)
    assert weights == [ONE // 100] * 100
    assert sum(weights) == ONE


def test_arbitrary_weights_sum_to_one():
    weights = to_normalized_weights([fp(3), fp(5), fp(11)])
    assert sum(weights) == ONE
    assert weights[0] < weights[1] < weights[2]


def test_format_units():
    assert format_units(1_234_567, 6) == "1.234567"
    assert format_units(2 * 10**21, 18) == "2,000.000000"


def test_zero_weights_cannot_be_normalized():
    with pytest.raises(ValueError, match="positive total"):
        to_normalized_weights([0, 0])
