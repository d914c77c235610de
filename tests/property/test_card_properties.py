"""卡牌效果的性质测试（Property-based）。

核心不变量：
1. 日光束伤害落在 [floor(14*0.85), floor(14*2*1.5*1.15)] 之内
2. 名称包含不死关键字（任意大小写）即判定为不死
3. 出牌成功时恰好扣除 cost 点法力
4. 任意随机序列下敌人生命不小于 0
5. 毒孢子层数不超过上限，敌人身上只有一个 poison 效果
6. 树皮术效果的 turns_remaining 总等于 duration
"""

from __future__ import annotations

import math
import random
import sys
from pathlib import Path

_project_root = str(Path(__file__).resolve().parents[2])
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from cardbattle.config import reset_config
from cardbattle.cards import BarkSkin, Poison, SolarBeam, create_default_registry
from cardbattle.cards.nature import UNDEAD_KEYWORDS, is_undead_name
from cardbattle.enemy import Enemy
from cardbattle.state import GameState
from i18n import get_locale, set_locale


# hypothesis 不允许函数级夹具，改为按模块恢复语言与配置
@pytest.fixture(scope="module", autouse=True)
def _isolate_globals():
    original = get_locale()
    set_locale("en_US")
    yield
    set_locale(original)
    reset_config()


class SequenceRandom:
    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def random(self) -> float:
        value = self.values[min(self.calls, len(self.values) - 1)]
        self.calls += 1
        return value


unit_floats = st.floats(min_value=0.0, max_value=1.0, exclude_max=True)
enemy_names = st.sampled_from(["Goblin", "Skeleton King", "Orc", "Dark Mage", "Zombie", "Slime"])


@given(crit=unit_floats, spread=unit_floats, name=enemy_names)
@settings(max_examples=200)
def test_solar_beam_damage_bounds(crit, spread, name):
    enemy = Enemy(name=name, max_hp=200)
    state = GameState(enemy_hp=200, enemy_max_hp=200, enemy=enemy)
    result = SolarBeam(rng=SequenceRandom([crit, spread])).execute_effect(state, enemy)

    assert result.success
    assert math.floor(14 * 0.85) <= result.damage <= math.floor(14 * 2 * 1.5 * 1.15)
    assert state.enemy_hp == 200 - result.damage
    if not is_undead_name(name) and not result.is_critical_hit:
        assert result.damage <= 16


@given(
    keyword=st.sampled_from(UNDEAD_KEYWORDS),
    prefix=st.text(alphabet="abc ", max_size=5),
    suffix=st.text(alphabet="xyz ", max_size=5),
    data=st.data(),
)
@settings(max_examples=100)
def test_undead_keyword_any_case(keyword, prefix, suffix, data):
    flips = data.draw(st.lists(st.booleans(), min_size=len(keyword), max_size=len(keyword)))
    mixed = "".join(c.upper() if f else c for c, f in zip(keyword, flips))
    assert is_undead_name(prefix + mixed + suffix)


@given(card_id=st.sampled_from(create_default_registry().names()), seed=st.integers(0, 2**32 - 1))
@settings(max_examples=100)
def test_play_spends_exact_cost(card_id, seed):
    card = create_default_registry().create(card_id, rng=random.Random(seed))
    card.update_state(is_in_hand=True)
    enemy = Enemy(name="Goblin", max_hp=80)
    state = GameState(player_hp=60, player_mana=30, enemy=enemy)

    result = card.play(state, target=enemy)

    assert result.success
    assert state.player_mana == 30 - card.cost + result.details.get("actual_gain", 0)
    assert enemy.hp >= 0
    assert state.enemy_hp == enemy.hp
    assert 0 <= state.player_hp <= state.player_max_hp


@given(seeds=st.lists(st.integers(0, 2**32 - 1), min_size=1, max_size=30))
@settings(max_examples=50)
def test_enemy_hp_never_negative(seeds):
    enemy = Enemy(name="Wraith", max_hp=40)
    state = GameState(enemy_hp=40, enemy_max_hp=40, enemy=enemy)
    for seed in seeds:
        SolarBeam(rng=random.Random(seed)).execute_effect(state, enemy)
        assert 0 <= state.enemy_hp <= 40
        assert enemy.hp == state.enemy_hp
    assert enemy.is_alive == (enemy.hp > 0)


@given(casts=st.integers(min_value=1, max_value=20))
@settings(max_examples=30)
def test_poison_stacks_capped(casts):
    enemy = Enemy(name="Goblin", max_hp=80)
    state = GameState(enemy=enemy)
    card = Poison()
    for i in range(casts):
        result = card.execute_effect(state, enemy)
        assert result.details["stacks"] == min(i + 1, 5)
    poisons = [e for e in enemy.active_effects if e.name == "poison"]
    assert len(poisons) == 1
    assert poisons[0].stacks <= poisons[0].max_stacks == 5


@given(duration=st.integers(min_value=0, max_value=10),
       reduction=st.floats(min_value=0.0, max_value=0.9))
@settings(max_examples=50)
def test_bark_skin_effect_fields(duration, reduction):
    state = GameState()
    result = BarkSkin(duration=duration, damage_reduction=reduction).execute_effect(state)
    [effect] = result.status_effects
    assert effect.turns_remaining == effect.duration == duration
    assert effect.details["damage_reduction"] == reduction
    assert state.active_effects == [effect]
