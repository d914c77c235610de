"""中文翻译表"""

STRINGS: dict[str, str] = {
    # ── 卡牌名称 ──
    "card.fire_blast": "烈焰冲击",
    "card.fireball": "火球术",
    "card.ember": "余烬",
    "card.solar_beam": "日光束",
    "card.bark_skin": "树皮术",
    "card.thorns": "荆棘",
    "card.regrow": "再生",
    "card.poison": "毒孢子",
    "card.entangle": "缠绕",
    "card.heal": "治疗术",
    "card.ice_spike": "冰刺",
    "card.mana_spring": "法力泉",
    "card.purify": "净化",
    "card.firestorm": "火焰风暴",
    "card.inferno": "炼狱",
    "card.combust": "自燃",
    "card.ironbark": "铁木皮",
    "card.seed_bomb": "种子炸弹",
    "card.sap": "汲取",
    "card.photosynthesis": "光合作用",
    "card.ice_wall": "冰墙",
    "card.hydro_boost": "激流增幅",
    "card.aqua_blast": "水爆",
    "card.regen": "回春",

    # ── 元素 ──
    "element.fire": "火",
    "element.nature": "自然",
    "element.water": "水",
    "element.ice": "冰",
    "element.neutral": "无",

    # ── 卡牌基类 ──
    "card.default_effect": "{name} 执行了默认效果",
    "card.invalid_conditions": "无法打出 {name}：条件不满足",
    "card.no_target": "{name} 需要指定目标",
    "card.no_game_state": "{name} 需要游戏状态",
    "card.full_health": "生命值已满！",
    "card.effect_not_applied": "{name} 造成 {damage} 点伤害，但没有可承载效果的目标",

    # ── 火系 ──
    "fire_blast.desc": "对敌人造成 {damage} 点伤害",
    "fire_blast.hit": "{name} 对敌人造成 {damage} 点伤害",
    "fireball.desc": "对敌人造成 {damage} 点伤害，{burn_chance} 概率点燃",
    "fireball.hit": "火球术造成 {damage} 点伤害",
    "fireball.hit_burn": "火球术造成 {damage} 点伤害并点燃了敌人！",
    "ember.desc": "造成 {damage} 点伤害，并在 {duration} 回合内每回合造成 {dot} 点伤害，可叠加",
    "ember.hit": "余烬点燃！{damage} 点伤害 + 每回合 {dot} 点持续伤害",
    "firestorm.desc": "攻击 {min_hits}~{max_hits} 次，每次至少造成 {damage} 点伤害",
    "firestorm.hit": "火焰风暴命中 {hits} 次，共造成 {damage} 点伤害！",
    "inferno.desc": "造成 {damage} 点伤害，{crit_chance} 暴击率，无视 {penetration} 防御",
    "inferno.hit": "炼狱吞噬敌人，造成 {damage} 点伤害！",
    "combust.desc": "造成 {damage} 点伤害。敌人生命低于 {threshold} 时伤害翻倍，击杀时返还法力",
    "combust.hit": "自燃造成 {damage} 点伤害",
    "combust.execute": "自燃斩杀，造成 {damage} 点伤害！",
    "combust.kill": "自燃终结敌人，造成 {damage} 点伤害！返还 {mana} 点法力",

    # ── 自然系 ──
    "solar_beam.desc": "造成 {damage} 点伤害，对不死/黑暗系敌人伤害翻倍",
    "solar_beam.hit": "日光束灼烧敌人，造成 {damage} 点伤害！",
    "bark_skin.desc": "{duration} 回合内受到的伤害降低 {reduction}",
    "bark_skin.applied": "皮肤化为树皮！伤害降低 {reduction}",
    "thorns.desc": "{duration} 回合内对攻击者反弹 {reflect} 点伤害",
    "thorns.applied": "荆棘屏障环绕着你！反弹 {reflect} 点伤害",
    "regrow.desc": "恢复 {heal} 点生命，并在 {duration} 回合内每回合恢复 {regen} 点",
    "regrow.applied": "自然之力恢复了 {heal} 点生命！",
    "poison.desc": "{duration} 回合内每回合造成 {damage} 点毒素伤害，最多叠加 {max_stacks} 层",
    "poison.applied": "毒孢子感染了敌人！毒素 {stacks}/{max_stacks} 层",
    "entangle.desc": "造成 {damage} 点伤害，眩晕敌人 {stun} 回合",
    "entangle.applied": "藤蔓缠住了敌人！眩晕 {stun} 回合！",
    "ironbark.desc": "获得 {shield} 点护盾，持续 {duration} 回合",
    "ironbark.applied": "铁木皮护体！{shield} 点护盾，持续 {duration} 回合",
    "seed_bomb.desc": "投出 {hits} 枚种子，每枚至少造成 {damage} 点伤害",
    "seed_bomb.hit": "{hits} 枚种子爆裂，共造成 {damage} 点伤害！",
    "sap.desc": "造成 {damage} 点伤害，并按造成的伤害恢复生命",
    "sap.hit": "汲取造成 {damage} 点伤害并恢复 {heal} 点生命",
    "photosynthesis.desc": "每回合获得 {mana} 点法力，持续 {duration} 回合",
    "photosynthesis.applied": "阳光滋养魔力！每回合 {mana} 点法力，持续 {duration} 回合",

    # ── 水系 ──
    "heal.desc": "恢复 {heal} 点生命，{crit_chance} 概率暴击治疗（{crit_multiplier} 倍）",
    "heal.applied": "治愈之水恢复了 {heal} 点生命",
    "heal.applied_crit": "治愈之水恢复了 {heal} 点生命（暴击！）",
    "ice_spike.desc": "造成 {damage} 点伤害，{crit_chance} 暴击率",
    "ice_spike.hit": "冰刺造成 {damage} 点伤害",
    "ice_spike.hit_crit": "冰刺造成 {damage} 点伤害（暴击！）",
    "mana_spring.desc": "恢复 {mana} 点法力，净收益 {net} 点",
    "mana_spring.applied": "法力泉恢复了 {mana} 点法力！",
    "purify.desc": "移除所有减益效果并恢复 {heal} 点生命",
    "purify.applied": "净化之水移除了 {count} 个减益效果",
    "purify.applied_heal": "净化之水移除了 {count} 个减益效果并恢复 {heal} 点生命",
    "ice_wall.desc": "获得 {shield} 点护盾，持续 {duration} 回合。攻击者有 {chance} 概率受到 {chill} 点冰寒伤害",
    "ice_wall.applied": "冰墙升起！获得 {shield} 点护盾",
    "hydro_boost.desc": "下一张水系法术伤害 +{bonus}",
    "hydro_boost.applied": "激流增幅！下一张水系法术伤害 +{bonus}！",
    "aqua_blast.desc": "造成 {damage} 点伤害，无视敌人 {penetration} 防御",
    "aqua_blast.hit": "水爆冲击敌人，造成 {damage} 点伤害！",
    "regen.desc": "每回合恢复 {heal} 点生命，持续 {duration} 回合",
    "regen.applied": "回春之水流淌！每回合恢复 {heal} 点生命，持续 {duration} 回合",

    # ── 异常 ──
    "exc.card_error": "卡牌错误",
    "exc.invalid_card": "卡牌参数无效",
    "exc.card_not_found": "未找到卡牌",
    "exc.effect_error": "效果错误",
    "exc.invalid_effect": "状态效果无效",
    "exc.configuration": "配置无效",
    "exc.negative_value": "{field} 不能为负数，当前为 {value}",

    # ── 命令行 ──
    "cli.description": "查看 Emoji 卡牌对战的卡牌库",
    "cli.catalog.help": "列出所有已注册的卡牌",
    "cli.cast.help": "在新的游戏状态上打出一张卡牌",
    "cli.opt.locale": "显示语言",
    "cli.opt.verbose": "在控制台输出日志",
    "cli.arg.card": "卡牌标识，如 solar_beam",
    "cli.opt.enemy": "敌人名称",
    "cli.opt.seed": "随机种子",
    "cli.opt.player_hp": "出牌前的玩家生命",
    "cli.catalog.title": "卡牌图鉴",
    "cli.col.id": "标识",
    "cli.col.name": "名称",
    "cli.col.element": "元素",
    "cli.col.cost": "消耗",
    "cli.col.stats": "属性",
    "cli.col.description": "描述",
    "cli.cast.title": "{card} -> {enemy}",
    "cli.cast.success": "成功",
    "cli.cast.failure": "失败（{reason}）",
    "cli.cast.damage": "伤害：{damage}",
    "cli.cast.healing": "治疗：{healing}",
    "cli.cast.critical": "暴击！",
    "cli.cast.effects": "状态效果：{effects}",
    "cli.cast.player": "玩家生命 {hp}/{max_hp} | 法力 {mana}/{max_mana}",
    "cli.cast.enemy": "{name}：{hp}/{max_hp} 生命",
    "cli.unknown_card": "未知卡牌：{name}",
    "cli.config_error": "配置无效：{errors}",

    # ── main.py ──
    "main.interrupted": "\n已中断，再见！",
    "main.error": "\n错误: {error}",
}
