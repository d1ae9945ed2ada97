''' Program text grammar '''

import pyparsing as pp


value = pp.Regex('[+-]?[0-9]+').set_parse_action(lambda r: int(r[0]))
value.set_name('integer')

program = pp.DelimitedList(value, delim=',')
