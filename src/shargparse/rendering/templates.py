"""Shell fragments assembled by :class:`ShellCodegen`.

Every fragment is POSIX sh. Placeholders use single braces; values reaching a
double-quoted context are escaped by the caller before substitution. Text is
printed with `printf '%s\\n'` since some shells' `echo` expands backslashes.
"""

PARAM_DECL = 'param_{name}=""'

COUNTER_DECL = '{counter}=0'

FLAG_DECL = 'flag_{var}="{default}"'

LOOP_OPEN = """\
while [ $# -gt 0 ] ; do
\tcase "${1%%=*}" in"""

HELP_OPEN = """\
\t\t-h | --help)
\t\t\tprintf '%s\\n' "Usage:"
\t\t\tprintf '%s\\n' "  $0{usage_args} [flags]\""""

HELP_BLANK = '\t\t\techo'

HELP_PARAM = '\t\t\tprintf \'%s\\n\' "  {upper}: {help}"'

HELP_FLAGS_HEADER = """\
\t\t\techo
\t\t\tprintf '%s\\n' "Flags:\""""

HELP_FLAG_ROW = '\t\t\tprintf \'%s\\n\' "{row}"'

HELP_CLOSE = """\
\t\t\texit 1
\t\t;;"""

FLAG_CASE = """\
\t\t{pattern})
\t\t\tif [ "${1#*=}" != "$1" ] ; then
\t\t\t\tflag_{var}="${1#*=}"
\t\t\telif [ $# -eq 1 ] || [ "${2#-}" != "$2" ] ; then
\t\t\t\tflag_{var}={sentinel}
\t\t\telse
\t\t\t\tshift
\t\t\t\tflag_{var}="$1"
\t\t\tfi
\t\t;;"""

UNKNOWN_FLAG_CASE = """\
\t\t-*)
\t\t\tprintf 'Unknown flag "%s"\\n' "$1" >&2
\t\t\texit 1
\t\t;;"""

POSITIONAL_OPEN = '\t\t*)'

POSITIONAL_FIRST = '\t\t\tif [ ${counter} -eq {index} ] ; then'

POSITIONAL_NEXT = '\t\t\telif [ ${counter} -eq {index} ] ; then'

POSITIONAL_ASSIGN = """\
\t\t\t\tparam_{name}="$1"
\t\t\t\t{counter}=$(({counter} + 1))"""

POSITIONAL_OVERFLOW = """\
\t\t\telse
\t\t\t\t{counter}=$(({counter} + 1))
\t\t\t\tprintf '%s: error: accepts {count} arg(s), received %s\\n' "$0" "${counter}" >&2
\t\t\t\texit 1
\t\t\tfi"""

POSITIONAL_NONE = """\
\t\t\tprintf '%s: error: accepts 0 arg(s), received 1 or more\\n' "$0" >&2
\t\t\texit 1"""

POSITIONAL_CLOSE = '\t\t;;'

LOOP_CLOSE = """\
\tesac
\tshift
done"""

ARITY_CHECK = """\
if [ ${counter} -lt {count} ] ; then
\tprintf '%s: error: accepts {count} arg(s), received %s\\n' "$0" "${counter}" >&2
\texit 1
fi
unset {counter}"""
