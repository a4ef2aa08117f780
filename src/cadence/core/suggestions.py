"""Built-in pools for title suggestions and the quote of the day."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Quote:
    id: int
    text: str
    author: str

    def format(self) -> str:
        return f"“{self.text}” — {self.author}"


TASK_EXAMPLES = [
    "Walk the dog",
    "Go for a 30-minute run",
    "Read a chapter of a book",
    "Meditate for 10 minutes",
    "Write a journal entry",
    "Plan tomorrow's schedule",
    "Drink 8 glasses of water",
    "Take daily vitamins",
    "Stretch for 15 minutes",
    "Call a family member",
    "Clear email inbox to zero",
    "Tidy up the workspace",
    "Practice a new language",
    "Water the houseplants",
    "Take out the trash and recycling",
    "Start a load of laundry",
    "Empty the dishwasher",
    "Create a grocery list",
    "Meal prep for the next 3 days",
    "Pay outstanding bills",
    "Review monthly budget",
    "Deep clean the bathroom",
    "Vacuum all floors",
    "Organize one drawer or closet",
    "Listen to an educational podcast",
    "Write down three things you're grateful for",
    "Set 3 main goals for the week",
    "Review progress on quarterly goals",
    "Work on a side project for an hour",
    "Prepare agenda for an upcoming meeting",
    "Follow up on important emails",
    "Take a 15-minute walk outside",
    "Practice a musical instrument",
    "Cook a new, healthy recipe",
    "Go to the gym for a strength session",
    "Backup important data to the cloud",
    "Check car tire pressure and fluids",
    "Schedule a dentist appointment",
    "Floss teeth thoroughly",
    "Mow the lawn",
    "Weed the garden beds",
    "Review and update your resume",
    "Unsubscribe from junk emails",
]

QUOTES = [
    Quote(1, "We are what we repeatedly do. Excellence, then, is not an act, but a habit.", "Will Durant"),
    Quote(2, "The secret of getting ahead is getting started.", "Mark Twain"),
    Quote(3, "It does not matter how slowly you go as long as you do not stop.", "Confucius"),
    Quote(4, "Well begun is half done.", "Aristotle"),
    Quote(5, "Little by little, one travels far.", "J.R.R. Tolkien"),
    Quote(6, "Action is the foundational key to all success.", "Pablo Picasso"),
    Quote(7, "Do what you can, with what you have, where you are.", "Theodore Roosevelt"),
    Quote(8, "Energy and persistence conquer all things.", "Benjamin Franklin"),
    Quote(9, "He who has a why to live can bear almost any how.", "Friedrich Nietzsche"),
    Quote(10, "The journey of a thousand miles begins with one step.", "Lao Tzu"),
    Quote(11, "You cannot escape the responsibility of tomorrow by evading it today.", "Abraham Lincoln"),
    Quote(12, "Quality is not an act, it is a habit.", "Aristotle"),
    Quote(13, "Motivation is what gets you started. Habit is what keeps you going.", "Jim Ryun"),
    Quote(14, "Small deeds done are better than great deeds planned.", "Peter Marshall"),
    Quote(15, "Lost time is never found again.", "Benjamin Franklin"),
    Quote(16, "Nothing will work unless you do.", "Maya Angelou"),
    Quote(17, "Either you run the day or the day runs you.", "Jim Rohn"),
    Quote(18, "Discipline is the bridge between goals and accomplishment.", "Jim Rohn"),
    Quote(19, "Success is the sum of small efforts, repeated day in and day out.", "Robert Collier"),
    Quote(20, "The best time to plant a tree was 20 years ago. The second best time is now.", "Chinese proverb"),
    Quote(21, "If you are going through hell, keep going.", "Winston Churchill"),
    Quote(22, "Perseverance is not a long race; it is many short races one after the other.", "Walter Elliot"),
    Quote(23, "What you do every day matters more than what you do once in a while.", "Gretchen Rubin"),
    Quote(24, "Great things are done by a series of small things brought together.", "Vincent van Gogh"),
    Quote(25, "First forget inspiration. Habit is more dependable.", "Octavia Butler"),
    Quote(26, "How we spend our days is, of course, how we spend our lives.", "Annie Dillard"),
    Quote(27, "Start where you are. Use what you have. Do what you can.", "Arthur Ashe"),
    Quote(28, "A year from now you may wish you had started today.", "Karen Lamb"),
    Quote(29, "Done is better than perfect.", "Sheryl Sandberg"),
    Quote(30, "You will never change your life until you change something you do daily.", "John C. Maxwell"),
    Quote(31, "The man who moves a mountain begins by carrying away small stones.", "Confucius"),
    Quote(32, "Amateurs sit and wait for inspiration, the rest of us just get up and go to work.", "Stephen King"),
    Quote(33, "Habits change into character.", "Ovid"),
    Quote(34, "Dripping water hollows out stone, not through force but through persistence.", "Ovid"),
    Quote(35, "Do the hard jobs first. The easy jobs will take care of themselves.", "Dale Carnegie"),
]
