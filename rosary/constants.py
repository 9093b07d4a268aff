"""
Rosary catalogue: mysteries, voice guides, pacing, languages and themes.
"""

from django.utils import timezone

JOYFUL = 'JOYFUL'
SORROWFUL = 'SORROWFUL'
GLORIOUS = 'GLORIOUS'
LUMINOUS = 'LUMINOUS'
INTRODUCTION = 'INTRODUCTION'

MYSTERIES = {
    JOYFUL: {
        'name': 'Joyful Mysteries',
        'short_name': 'Joyful',
        'description': (
            'The Joyful Mysteries focus on the Incarnation and early life of '
            'Christ through the eyes of Mary.'),
        'color': '#0ACF83',
        'icon': 'leaf',
        'mysteries': [
            ('The Annunciation',
             'The Angel Gabriel announces to Mary that she shall conceive the Son of God.'),
            ('The Visitation',
             'Mary visits her cousin Elizabeth, who is pregnant with John the Baptist.'),
            ('The Nativity', 'Jesus is born in a stable in Bethlehem.'),
            ('The Presentation', 'Mary and Joseph present Jesus at the temple.'),
            ('Finding in the Temple',
             'After being lost for three days, Jesus is found in the temple.'),
        ],
    },
    SORROWFUL: {
        'name': 'Sorrowful Mysteries',
        'short_name': 'Sorrowful',
        'description': (
            'The Sorrowful Mysteries focus on the Passion of Christ and his '
            'suffering for our salvation.'),
        'color': '#FF4757',
        'icon': 'heart-broken',
        'mysteries': [
            ('The Agony in the Garden',
             'Jesus prays in the Garden of Gethsemane on the night of His betrayal.'),
            ('The Scourging at the Pillar', 'Jesus is tied to a pillar and whipped.'),
            ('The Crowning with Thorns', 'Jesus is mocked and crowned with thorns.'),
            ('The Carrying of the Cross', 'Jesus carries His cross to Calvary.'),
            ('The Crucifixion', 'Jesus is nailed to the cross and dies.'),
        ],
    },
    GLORIOUS: {
        'name': 'Glorious Mysteries',
        'short_name': 'Glorious',
        'description': (
            'The Glorious Mysteries focus on the Resurrection of Jesus and the '
            'glories of heaven.'),
        'color': '#7158e2',
        'icon': 'crown',
        'mysteries': [
            ('The Resurrection', 'Jesus rises from the dead on the third day.'),
            ('The Ascension', 'Jesus ascends into Heaven forty days after His resurrection.'),
            ('The Descent of the Holy Spirit',
             'The Holy Spirit descends upon Mary and the apostles.'),
            ('The Assumption', 'Mary is assumed body and soul into Heaven.'),
            ('The Coronation', 'Mary is crowned Queen of Heaven and Earth.'),
        ],
    },
    LUMINOUS: {
        'name': 'Luminous Mysteries',
        'short_name': 'Luminous',
        'description': (
            'The Luminous Mysteries focus on the public ministry of Jesus and '
            'the institution of the Eucharist.'),
        'color': '#18DCFF',
        'icon': 'star',
        'mysteries': [
            ('The Baptism in the Jordan', 'Jesus is baptized by John the Baptist.'),
            ('The Wedding at Cana',
             'Jesus performs His first miracle, changing water into wine.'),
            ('The Proclamation of the Kingdom',
             'Jesus announces the Kingdom of God and calls all to conversion.'),
            ('The Transfiguration', 'Jesus is transfigured on Mount Tabor.'),
            ('The Institution of the Eucharist',
             'Jesus institutes the Eucharist at the Last Supper.'),
        ],
    },
}

MYSTERY_CHOICES = [(key, value['name']) for key, value in MYSTERIES.items()]

# Python weekday (Monday == 0) -> mystery prayed that day
DAY_MYSTERIES = {
    0: JOYFUL,
    1: SORROWFUL,
    2: GLORIOUS,
    3: LUMINOUS,
    4: SORROWFUL,
    5: JOYFUL,
    6: GLORIOUS,
}

VOICE_GUIDES = [
    {'id': 1, 'name': 'Francis', 'gender': 'male'},
    {'id': 2, 'name': 'Claire', 'gender': 'female'},
    {'id': 3, 'name': 'Thomas', 'gender': 'male'},
    {'id': 4, 'name': 'Maria', 'gender': 'female'},
]

# Shorter sessions recite faster
AUDIO_DURATIONS = [
    {'id': 1, 'duration': '15 min', 'multiplier': 1.5},
    {'id': 2, 'duration': '20 min', 'multiplier': 1.0},
    {'id': 3, 'duration': '25 min', 'multiplier': 0.75},
    {'id': 4, 'duration': '30 min', 'multiplier': 0.5},
]

LANGUAGES = [
    {'id': 1, 'name': 'English', 'code': 'en'},
    {'id': 2, 'name': 'Spanish', 'code': 'es'},
    {'id': 3, 'name': 'Latin', 'code': 'la'},
    {'id': 4, 'name': 'Italian', 'code': 'it'},
    {'id': 5, 'name': 'French', 'code': 'fr'},
    {'id': 6, 'name': 'Polish', 'code': 'pl'},
    {'id': 7, 'name': 'Portuguese', 'code': 'pt'},
]

PRAYER_THEMES = [
    {'id': 1, 'name': 'Standard', 'primary': '#7158e2', 'secondary': '#5F45C2', 'accent': '#F0ECFF'},
    {'id': 2, 'name': 'Tranquil', 'primary': '#0ACF83', 'secondary': '#07A866', 'accent': '#E8FFF4'},
    {'id': 3, 'name': 'Traditional', 'primary': '#B33C86', 'secondary': '#9A256F', 'accent': '#FCE4F4'},
    {'id': 4, 'name': 'Peaceful', 'primary': '#18DCFF', 'secondary': '#0ABDE3', 'accent': '#E4F9FF'},
    {'id': 5, 'name': 'Desert', 'primary': '#F89D29', 'secondary': '#EB8B19', 'accent': '#FFF2E2'},
]

VOICE_CHOICES = [(guide['name'], guide['name']) for guide in VOICE_GUIDES]
DURATION_CHOICES = [(d['duration'], d['duration']) for d in AUDIO_DURATIONS]
LANGUAGE_CHOICES = [(lang['code'], lang['name']) for lang in LANGUAGES]
THEME_CHOICES = [(theme['name'], theme['name']) for theme in PRAYER_THEMES]

DEFAULT_SETTINGS = {
    'voice_guide': VOICE_GUIDES[0]['name'],
    'duration': AUDIO_DURATIONS[1]['duration'],
    'language': LANGUAGES[0]['code'],
    'theme': PRAYER_THEMES[0]['name'],
    'auto_play_next': True,
    'show_images': True,
    'text_size': 50,
    'vibration_enabled': True,
    'allow_screen_dimming': False,
    'background_ambience': True,
    'reminders': False,
    'notifications_enabled': False,
}

PLAYBACK_RATES = (0.75, 1.0, 1.25, 1.5)


def mystery_of_the_day(day=None):
    """Mystery key for ``day`` (a date, defaults to today)."""
    day = day or timezone.localdate()
    return DAY_MYSTERIES[day.weekday()]


def find_option(options, key, value):
    return next((option for option in options if option[key] == value), None)
