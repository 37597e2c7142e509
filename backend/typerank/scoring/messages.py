"""Display copy for comparison results."""

TIE_EXPLANATION = (
    "Complete tie! Both participants performed identically. Re-test may be required."
)
TIE_MOTIVATION = "Great effort from both participants!"
NO_REASON_FALLBACK = "Complete tie - Results are identical!"

CLOSE_MATCH = (
    "🔥 That was a really close match! A little more improvement and you "
    "could have won. Keep practicing!"
)
ACCURACY_COACHING = (
    "🎯 Work on your accuracy. Correctness matters as much as speed. "
    "Focus on typing correctly first."
)
SPEED_PRACTICE = (
    "⚡ Build up your speed! 30 minutes of daily typing practice will "
    "definitely improve it."
)
ERROR_REDUCTION = (
    "✨ Try to cut down on errors. Slow down a bit, raise your accuracy, "
    "then bring the speed back."
)
GENERIC_ENCOURAGEMENT = (
    "💪 Great attempt! Consistent practice will bring a better performance next time."
)

REASON_SEPARATOR = " • "
