'''Short, random, reversible base62 tokens for Django.

Tokens are unsigned 64-bit ints that the outside world sees as strings of up
to 10 characters, e.g. 2751173559858 <-> 'Mr1NSSu'. Store the int (see
`shorttoken.fields.TokenField`) and hand out the string.

Tokens are not secrets, and random ones can collide. Always check for
collisions, e.g. with a unique constraint.

'''
