# ABOUTME: Fixed ASCII-art pictures for each renderable weather category.
# ABOUTME: Pure data; hail, snow and thunderstorm have no picture yet.

TORNADO = "              . '@(@@@@@@@)@. (@@) `  .   '\n     .  @@'((@@@@@@@@@@@)@@@@@)@@@@@@@)@ \n     @@(@@@@@@@@@@))@@@@@@@@@@@@@@@@)@@` .\n  @.((@@@@@@@)(@@@@@@@@@@@@@@))@\\@@@@@@@@@)@@@  .\n (@@@@@@@@@@@@@@@@@@)@@@@@@@@@@@\\\\@@)@@@@@@@@)\n(@@@@@@@@)@@@@@@@@@@@@@(@@@@@@@@//@@@@@@@@@) ` \n .@(@@@@)##&&&&&(@@@@@@@@)::_=(@\\\\@@@@)@@ .   .'\n   @@`(@@)###&&&&&!!;;;;;;::-_=@@\\\\@)@`@.\n   `   @@(@###&&&&!!;;;;;::-=_=@.@\\\\@@     '\n      `  @.#####&&&!!;;;::=-_= .@  \\\\\n            ####&&&!!;;::=_-        `\n             ###&&!!;;:-_=\n              ##&&!;::_=\n             ##&&!;:=\n            ##&&!:-\n           #&!;:-\n          #&!;=\n          #&!-\n           #&=\n   jgs      #&-\n            \\\\#/'"

RAIN = r"""            ------               _____
           /      \ ___\     ___/    ___
        --/-  ___  /    \/  /  /    /   \
       /     /           \__     //_     \
      /                     \   / ___     |
      |           ___       \/+--/        /
       \__           \       \           /
          \__                 |          /
         \     /____      /  /       |   /
          _____/         ___       \/  /\
               \__      /      /    |    |
             /    \____/   \       /   //
         // / / // / /\    /-_-/\//-__-
          /  /  // /   \__// / / /  //
         //   / /   //   /  // / // /
          /// // / /   /  //  / //
       //   //       //  /  // / /
         / / / / /     /  /    /
      ///  / / /  //  // /  // //
         ///    /    /    / / / /
    ///  /    // / /  // / / /  /
       // ///   /      /// / /"""

CLOUDS = "\n                _                                  \n              (`  ).                   _           \n             (     ).              .:(`  )`.       \n)           _(       '`.          :(   .    )      \n        .=(`(      .   )     .--  `.  (    ) )      \n       ((    (..__.:'-'   .+(   )   ` _`  ) )                 \n`.     `(       ) )       (   .  )     (   )  ._   \n  )      ` __.:'   )     (   (   ))     `-'.-(`  ) \n)  )  ( )       --'       `- __.'         :(      )) \n.-'  (_.'          .')                    `(    )  ))\n                  (_  )                     ` __.:'          \n                                        \n"

SUN = "      ;   :   ;\n   .   \\_,!,_/   ,\n    `.,'     `.,'\n     /         \\\n~ -- :         : -- ~\n     \\         /\n    ,'`._   _.'`.\n   '   / `!` \\   `\n      ;   :   ;  hjw"
