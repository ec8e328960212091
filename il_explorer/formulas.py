# LaTeX sources for the "The maths" section of the dashboard.

PRICE_RATIO = r"k = \frac{New \enspace AVAX \enspace price}{Old \enspace AVAX \enspace price}"

YIELD_GROWTH = r"g = \text{growth in yyAVAX value in terms of AVAX}"

IL_BASIC = r"IL_{1} = \frac{2 \sqrt k}{1 + k} - 1"

IL_YIELD = r"IL_{2} = \frac{2 \sqrt {k(1+g)}}{1 + k(1+g)} - 1"

IL_YIELD_VS_HOLD = r"IL_{3} = \frac{(2+kg) \sqrt {k(1+g)}}{1 + k(1+g)} - 1"

NET_LOSS_GAIN = r"Net \: loss/gain = (IL + 1) (1 + t + f) - 1"

SERIES_FORMULAS = (
    ("IL (1)", IL_BASIC),
    ("IL (2)", IL_YIELD),
    ("IL* (3)", IL_YIELD_VS_HOLD),
)
