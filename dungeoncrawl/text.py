"""Messages shown to the player. Templates use ``str.format`` placeholders."""

GAME_TITLE = "Dungeon"

GAME_START_1 = "You woke up in the strange kitchen.\n"
GAME_START_2 = 'Enter the "s" to search this room.\n'
GAME_START_3 = "Searching"
GAME_START_4 = "..."
GAME_START_5 = "You found the map that placed on the wall.\n\n"

GAME_DESCRIPTION_1 = "Your location is P.\n"
GAME_DESCRIPTION_2 = "? is random encounter.\n"
GAME_DESCRIPTION_3 = "@ is exit.\n\n"
GAME_DESCRIPTION_4 = (
    "To escape from dungeon, you need Key. "
    "Key can be obtained from K location in the map.\n\n"
)

MOVE_DESCRIPTION = (
    "You can move in four direction. (W: up, A: left, S: down, D: right)\n"
)
MOVE_INPUT = "Enter the direction.\n"
MOVE_CHECK = "Invalid direction."
MOVE_VALID_1 = "You cannot go through the fourth wall.\n\n"
MOVE_VALID_2 = "You tried to go to the direction, but wall blocked you.\n\n"

RANDOM_EVENT_RING_1 = "You found treasure box!\n"
RANDOM_EVENT_RING_2 = "It contains ring of brave!\n"
RANDOM_EVENT_RING_3 = "ATK +3!\n"
RANDOM_EVENT_RING_4 = "Your ATK is now {}.\n\n"

RANDOM_EVENT_ARMOR_1 = "You found treasure box!\n"
RANDOM_EVENT_ARMOR_2 = "It contains armor!\n"
RANDOM_EVENT_ARMOR_3 = "DEF +3!\n"
RANDOM_EVENT_ARMOR_4 = "Your DEF is now {}.\n\n"

RANDOM_EVENT_ENEMY_1 = "You encountered enemy! Enter the number of your action.\n"
RANDOM_EVENT_ENEMY_2 = "Invalid action.\n"
RANDOM_EVENT_ENEMY_3 = "YOU WIN!\n"
RANDOM_EVENT_ENEMY_4 = "You escaped from that place.\n"
RANDOM_EVENT_ENEMY_5 = "You left the place. And the place collapsed.\n\n"
RANDOM_EVENT_ENEMY_6 = "YOU LOSE\n\n"

RANDOM_EVENT_NOTHING_1 = "There was nothing in the place.\n"
RANDOM_EVENT_NOTHING_2 = "You left the place. And the place collapsed.\n\n"

BATTLE_INPUT_1 = "1: Attack, 2: Heal[Cost MP: 3], 3: Run\n"

BATTLE_ATTACK_1 = "You attack the goblin!\n"
BATTLE_ATTACK_2 = "The mob's HP is now {}.\n"
BATTLE_ATTACK_ENEMY_1 = "The goblin attack back!\n"
BATTLE_ATTACK_ENEMY_2 = "The player's HP is now {}.\n"

BATTLE_HEAL_1 = "You cast heal!\n"
BATTLE_HEAL_2 = "Your HP is now {}.\n"
BATTLE_HEAL_3 = "Your MP is now {}.\n"
BATTLE_HEAL_FAIL_1 = "You don't have enoguh MP.\n"
BATTLE_HEAL_FAIL_2 = "Your MP is {}.\n"

EVENT_EXIT_1 = "The key just fit to the door keyhole!\n"
EVENT_EXIT_2 = "You escape from that dungeon!\n\n"
EVENT_EXIT_FAIL = "You don't have all keys. so you cannot get out from here!\n\n"

EVENT_KEY = "You found the key!\n\n"

EVENT_DEFAULT = "You walk to another place.\n\n"

MAP_DOOR_FAIL = "The door is locked.\n\n"
MAP_MOVE = "You moved to {}.\n\n"