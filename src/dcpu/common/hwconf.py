
WORD_MASK       = 0xFFFF

# Instruction word layout: aaaaaabbbbbooooo
OPCODE_MASK     = 0x1F
B_SHIFT         = 5
B_MASK          = 0x1F
A_SHIFT         = 10
A_MASK          = 0x3F

REGISTERS       = ('A', 'B', 'C', 'X', 'Y', 'Z', 'I', 'J')

SP_NAME = 'SP'      # Stack pointer
PC_NAME = 'PC'      # Program counter
EX_NAME = 'EX'      # Extra (overflow) register

LITERAL_BIAS    = 0x21       # 0x20..0x3F encode -1..30
