# (glyph, name, pronunciation) in traditional alphabetical order
HIJAIYYAH_LETTERS = (
    ('ا', 'Alif', 'alif'),
    ('ب', 'Ba', 'ba'),
    ('ت', 'Ta', 'ta'),
    ('ث', 'Tsa', 'tsa'),
    ('ج', 'Jim', 'jim'),
    ('ح', 'Ha', 'ḥa'),
    ('خ', 'Kho', 'kho'),
    ('د', 'Dal', 'dal'),
    ('ذ', 'Dzal', 'dzal'),
    ('ر', 'Ro', 'ro'),
    ('ز', 'Zai', 'zai'),
    ('س', 'Sin', 'sin'),
    ('ش', 'Syin', 'syin'),
    ('ص', 'Shod', 'shod'),
    ('ض', 'Dhod', 'dhod'),
    ('ط', 'Tho', 'tho'),
    ('ظ', 'Zho', 'zho'),
    ('ع', 'Ain', "'ain"),
    ('غ', 'Ghoin', 'ghoin'),
    ('ف', 'Fa', 'fa'),
    ('ق', 'Qof', 'qof'),
    ('ك', 'Kaf', 'kaf'),
    ('ل', 'Lam', 'lam'),
    ('م', 'Mim', 'mim'),
    ('ن', 'Nun', 'nun'),
    ('و', 'Wau', 'wau'),
    ('ه', 'Haa', 'ha'),
    ('ي', 'Ya', 'ya'),
)

LETTERS_PER_LEVEL = 7

# (name, description) per level, in level_number order
LEVELS = (
    ('First Letters', 'Learn your first Hijaiyyah letters'),
    ('Building Blocks', 'Letters that look alike: dots make the difference'),
    ('Getting Fluent', 'Heavier sounds and new shapes'),
    ('Alphabet Master', 'Finish the Hijaiyyah alphabet'),
)
