# Huffman Text Codec
# errors.py
# 10/18/26

class HuffmanError(ValueError): # base class for everything the codec raises on bad input
    pass

class EmptyInputError(HuffmanError): # frequency table with no symbols at all
    pass

class ReservedSymbolError(HuffmanError): # input already contains the end-of-stream symbol
    pass

class MalformedContainerError(HuffmanError): # length prefix / trailing trash byte do not fit the buffer
    pass

class MalformedTreeError(HuffmanError): # serialized tree is truncated, has a bad marker or extra bytes
    pass

class CorruptStreamError(HuffmanError): # bitstream does not walk the tree to the end-of-stream symbol
    pass
