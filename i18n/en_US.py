"""English translation table."""

STRINGS: dict[str, str] = {
    # ── Card names ──
    "card.fire_blast": "Fire Blast",
    "card.fireball": "Fireball",
    "card.ember": "Ember",
    "card.solar_beam": "SolarBeam",
    "card.bark_skin": "BarkSkin",
    "card.thorns": "Thorns",
    "card.regrow": "Regrow",
    "card.poison": "Poison",
    "card.entangle": "Entangle",
    "card.heal": "Heal",
    "card.ice_spike": "IceSpike",
    "card.mana_spring": "ManaSpring",
    "card.purify": "Purify",
    "card.firestorm": "Firestorm",
    "card.inferno": "Inferno",
    "card.combust": "Combust",
    "card.ironbark": "Ironbark",
    "card.seed_bomb": "SeedBomb",
    "card.sap": "Sap",
    "card.photosynthesis": "Photosynthesis",
    "card.ice_wall": "IceWall",
    "card.hydro_boost": "HydroBoost",
    "card.aqua_blast": "AquaBlast",
    "card.regen": "Regen",

    # ── Elements ──
    "element.fire": "Fire",
    "element.nature": "Nature",
    "element.water": "Water",
    "element.ice": "Ice",
    "element.neutral": "Neutral",

    # ── Card base ──
    "card.default_effect": "{name} executed its default effect",
    "card.invalid_conditions": "Cannot play {name}: conditions not met",
    "card.no_target": "{name} needs a target",
    "card.no_game_state": "{name} needs a game state",
    "card.full_health": "Already at full health!",
    "card.effect_not_applied": "{name} deals {damage} damage, but there is nothing to hold its effects",

    # ── Fire ──
    "fire_blast.desc": "Deals {damage} damage to the enemy",
    "fire_blast.hit": "{name} dealt {damage} damage to the enemy",
    "fireball.desc": "Deals {damage} damage to the enemy. {burn_chance} chance to burn.",
    "fireball.hit": "Fireball dealt {damage} damage",
    "fireball.hit_burn": "Fireball dealt {damage} damage and set the enemy ablaze!",
    "ember.desc": "Deals {damage} damage + {dot} damage/turn for {duration} turns. Stacks.",
    "ember.hit": "Ember planted! {damage} damage + {dot}/turn DoT",
    "firestorm.desc": "Strikes {min_hits}-{max_hits} times for {damage}+ damage each",
    "firestorm.hit": "Firestorm strikes {hits} times for {damage} total damage!",
    "inferno.desc": "Deals {damage} damage. {crit_chance} crit chance. Ignores {penetration} of defense.",
    "inferno.hit": "Inferno engulfs the enemy for {damage} damage!",
    "combust.desc": "Deals {damage} damage. Double damage below {threshold} HP. Refunds mana on kill.",
    "combust.hit": "Combust deals {damage} damage",
    "combust.execute": "Combust executes for {damage} damage!",
    "combust.kill": "Combust finishes the enemy for {damage} damage! {mana} mana refunded",

    # ── Nature ──
    "solar_beam.desc": "Deals {damage} damage. 2x damage vs undead/dark enemies.",
    "solar_beam.hit": "SolarBeam scorches the enemy for {damage} damage!",
    "bark_skin.desc": "Reduce incoming damage by {reduction} for {duration} turns",
    "bark_skin.applied": "Your skin hardens to bark! {reduction} damage reduction",
    "thorns.desc": "Reflect {reflect} damage to attackers for {duration} turns",
    "thorns.applied": "A thorny barrier surrounds you! {reflect} reflect damage",
    "regrow.desc": "Restore {heal} HP + {regen} HP/turn for {duration} turns",
    "regrow.applied": "Nature's embrace restores {heal} HP!",
    "poison.desc": "Apply {damage} poison damage/turn for {duration} turns. Stacks up to {max_stacks} times.",
    "poison.applied": "Toxic spores infect the enemy! {stacks}/{max_stacks} poison stacks",
    "entangle.desc": "Deal {damage} damage. Stun the enemy for {stun} turn.",
    "entangle.applied": "Vines entangle the enemy! Stunned for {stun} turn!",
    "ironbark.desc": "Gain a {shield} HP shield for {duration} turns",
    "ironbark.applied": "Ironbark shields you! {shield} HP shield for {duration} turns",
    "seed_bomb.desc": "Hurl {hits} seeds, each dealing {damage}+ damage",
    "seed_bomb.hit": "{hits} seeds burst for {damage} total damage!",
    "sap.desc": "Deals {damage} damage and heals you for the damage dealt",
    "sap.hit": "Sap drains {damage} damage and restores {heal} HP",
    "photosynthesis.desc": "Gain {mana} mana per turn for {duration} turns",
    "photosynthesis.applied": "Sunlight fuels your magic! {mana} mana/turn for {duration} turns",

    # ── Water ──
    "heal.desc": "Restores {heal} HP. {crit_chance} chance for a critical heal ({crit_multiplier}x)",
    "heal.applied": "Healing waters restored {heal} HP",
    "heal.applied_crit": "Healing waters restored {heal} HP (Critical!)",
    "ice_spike.desc": "Deals {damage} damage. {crit_chance} crit chance",
    "ice_spike.hit": "IceSpike pierced the enemy for {damage} damage",
    "ice_spike.hit_crit": "IceSpike pierced the enemy for {damage} damage (Critical!)",
    "mana_spring.desc": "Restore {mana} mana. Net gain: {net} mana",
    "mana_spring.applied": "ManaSpring restores {mana} mana!",
    "purify.desc": "Remove all debuffs and heal {heal} HP",
    "purify.applied": "Purifying waters cleanse {count} debuff(s)",
    "purify.applied_heal": "Purifying waters cleanse {count} debuff(s) and heal {heal} HP",
    "ice_wall.desc": "Gain a {shield} HP shield for {duration} turns. Attackers have {chance} chance to take {chill} chill damage",
    "ice_wall.applied": "A wall of ice rises! {shield} HP shield",
    "hydro_boost.desc": "Next water spell deals +{bonus} damage",
    "hydro_boost.applied": "HydroBoost! Next water spell +{bonus} damage!",
    "aqua_blast.desc": "Deals {damage} damage. Ignores {penetration} of enemy defense",
    "aqua_blast.hit": "AquaBlast crashes into the enemy for {damage} damage!",
    "regen.desc": "Heal {heal} HP per turn for {duration} turns",
    "regen.applied": "Renewing waters flow! {heal} HP/turn for {duration} turns",

    # ── Exceptions ──
    "exc.card_error": "Card error",
    "exc.invalid_card": "Invalid card parameters",
    "exc.card_not_found": "Card not found",
    "exc.effect_error": "Effect error",
    "exc.invalid_effect": "Invalid status effect",
    "exc.configuration": "Invalid configuration",
    "exc.negative_value": "{field} must not be negative, got {value}",

    # ── CLI ──
    "cli.description": "Inspect the Emoji Card Battle card library",
    "cli.catalog.help": "List every registered card",
    "cli.cast.help": "Play one card against a fresh game state",
    "cli.opt.locale": "Display language",
    "cli.opt.verbose": "Write log records to the console",
    "cli.arg.card": "Card id, e.g. solar_beam",
    "cli.opt.enemy": "Enemy name",
    "cli.opt.seed": "Random seed",
    "cli.opt.player_hp": "Player HP before the card is played",
    "cli.catalog.title": "Card Catalog",
    "cli.col.id": "ID",
    "cli.col.name": "Name",
    "cli.col.element": "Element",
    "cli.col.cost": "Cost",
    "cli.col.stats": "Stats",
    "cli.col.description": "Description",
    "cli.cast.title": "{card} -> {enemy}",
    "cli.cast.success": "Success",
    "cli.cast.failure": "Failed ({reason})",
    "cli.cast.damage": "Damage: {damage}",
    "cli.cast.healing": "Healing: {healing}",
    "cli.cast.critical": "Critical hit!",
    "cli.cast.effects": "Status effects: {effects}",
    "cli.cast.player": "Player HP {hp}/{max_hp} | Mana {mana}/{max_mana}",
    "cli.cast.enemy": "{name}: {hp}/{max_hp} HP",
    "cli.unknown_card": "Unknown card: {name}",
    "cli.config_error": "Invalid configuration: {errors}",

    # ── main.py ──
    "main.interrupted": "\nInterrupted. Goodbye!",
    "main.error": "\nError: {error}",
}
