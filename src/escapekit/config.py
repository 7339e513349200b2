"""Default configuration settings for the escapekit tool."""

DEFAULT_CONFIG = {
	# Escape command configuration
	"escape": {
		# Style used when --style is not given: script, url, var or regex
		"style": "script",
		# Script style flags (ignored by the other styles)
		"no_printables": False,
		"no_quoted": False,
		"no_tilde": False,
		"symbolic": False,
	},
	# Unescape command configuration
	"unescape": {
		# Style used when --style is not given: script, url, var or regex
		"style": "script",
	},
}
